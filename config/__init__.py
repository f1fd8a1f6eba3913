# config package — authoritative source for the counter service description.
#
# Sub-modules:
#   service_config.py  — service origin, operations, admin partition,
#                        identifier pattern, authorization scheme
#
# Execution constants (attempt ceiling, backoff, timeouts) live in
# src/counter_action/config.py.
