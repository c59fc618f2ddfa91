"""Statement kinds (SELECT, INSERT, UPDATE, DELETE) and their compilers.

Every statement is a pydantic model tagged by ``kind``. ``compile()`` returns a
:class:`CompiledQuery` without touching the database; ``await execute()``
compiles and sends it through the bound database's ``query()``.
"""

from ._bases import CompiledQuery, QueryError, QueryResult, Statement
from .delete import DeleteQuery
from .insert import ConflictClause, ConflictSpec, InsertQuery
from .select import QueryDescriptor, SelectOptions, SelectQuery
from .update import UpdateQuery
from .upsert import UpsertQuery

__all__ = [
    "CompiledQuery",
    "ConflictClause",
    "ConflictSpec",
    "DeleteQuery",
    "InsertQuery",
    "QueryDescriptor",
    "QueryError",
    "QueryResult",
    "SelectOptions",
    "SelectQuery",
    "Statement",
    "UpdateQuery",
    "UpsertQuery",
]
