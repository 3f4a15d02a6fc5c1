"""
SQLAlchemy-backed stores. Import the concrete modules directly, e.g.
``from recruitment.infrastructure.stores.dao import RecruitmentDAO``.
"""
