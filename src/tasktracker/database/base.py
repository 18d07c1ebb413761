"""
Declarative base shared by every ORM model.

The naming convention gives constraints stable names (e.g. `uq_user_assign_user_id`)
so integrity errors can be traced back to the constraint that fired.
"""

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import DeclarativeBase

# 64-bit ids on Postgres; SQLite only auto-increments INTEGER PRIMARY KEY.
BigIntId = BigInteger().with_variant(Integer(), "sqlite")


class Base(DeclarativeBase):
    pass


Base.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}
