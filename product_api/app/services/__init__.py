"""
Service layer.

Services encapsulate the business logic and operate on an injected
store, so API handlers stay thin and tests can use isolated data.
"""
