"""
Project Lifecycle

Pure decision functions (membership action, access predicates, field
validation, judge reconciliation) and the service functions that apply their
outcome through the store.
"""
