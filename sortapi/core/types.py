from typing import TypeVar

TEntity = TypeVar("TEntity")
