"""Order Repositories — the two OrderRepository variants.

Invariants:
    - memory.InMemoryOrderRepository and sql.SqlOrderRepository pass the same contract tests
    - Both reject a duplicate create with OrderAlreadyExistsError
"""
