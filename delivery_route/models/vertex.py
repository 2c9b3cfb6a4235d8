# Tagged union over the two vertex variants, discriminated by `kind`.

from typing import Annotated, Any, Iterable, List, Union
from pydantic import Field, TypeAdapter

from .customer import Customer
from .depot import Depot

Vertex = Annotated[Union[Depot, Customer], Field(discriminator="kind")]

_VERTEX = TypeAdapter(Vertex)


def parse_vertices(raw: Iterable[Any]) -> List[Vertex]:
    """Validate raw dicts into Depot/Customer using the `kind` tag; model instances are kept as-is."""
    return [v if isinstance(v, (Depot, Customer)) else _VERTEX.validate_python(v) for v in raw]
