from sqlalchemy import JSON, String
from sqlalchemy.dialects.postgresql import ARRAY, JSONB
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement
from sqlalchemy.types import Boolean

# Largest value a PostgreSQL INTEGER column or SERIAL key holds
INT4_MAX = 2**31 - 1

StringArray = ARRAY(String).with_variant(JSON(), "sqlite")
JSONDocument = JSON().with_variant(JSONB(), "postgresql")


class array_contains(FunctionElement):
    """``array_contains(column, value)``: ``value`` is an element of the array ``column``."""

    type = Boolean()
    inherit_cache = True
    name = "array_contains"


@compiles(array_contains)
def _array_contains_any(element, compiler, **kw):
    column, value = list(element.clauses)
    return "%s = ANY(%s)" % (compiler.process(value, **kw), compiler.process(column, **kw))


@compiles(array_contains, "sqlite")
def _array_contains_json_each(element, compiler, **kw):
    column, value = list(element.clauses)
    return "EXISTS (SELECT 1 FROM json_each(%s) WHERE json_each.value = %s)" % (
        compiler.process(column, **kw),
        compiler.process(value, **kw),
    )
