"""
Service layer.

Each service encapsulates the logic for one collection and receives
the record store as an argument, so handlers stay thin and tests can
run the services against any object with the same methods.
"""
