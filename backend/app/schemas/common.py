import math
from typing import Annotated, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from app.core.errors import ValidationError

M = TypeVar("M", bound=BaseModel)

INT64_MAX = 2**63 - 1
INT32_MAX = 2**31 - 1

# Column-sized integers: BIGINT ids, INTEGER versions
Int64 = Annotated[int, Field(ge=-INT64_MAX - 1, le=INT64_MAX)]
Int32 = Annotated[int, Field(ge=-INT32_MAX - 1, le=INT32_MAX)]


class CamelModel(BaseModel):
    # Wire format is camelCase (Roblox client); python side stays snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class OkOut(BaseModel):
    ok: bool = True
    deduped: bool | None = None


def coerce_int(v):
    """Lenient integer parsing: ints, integral-or-not finite floats, numeric strings."""
    if v is None or isinstance(v, bool):
        return v
    if isinstance(v, float):
        return int(v) if math.isfinite(v) else v
    if isinstance(v, str):
        try:
            f = float(v.strip())
        except ValueError:
            return v
        return int(f) if math.isfinite(f) else v
    return v


def coerce_str(v):
    """Numeric ids/labels arrive as JSON numbers from some clients; keep them as text."""
    if isinstance(v, bool):
        return v
    if isinstance(v, int):
        return str(v)
    if isinstance(v, float) and math.isfinite(v):
        return str(int(v)) if v.is_integer() else str(v)
    return v


def parse_body(model: type[M], raw) -> M:
    if not isinstance(raw, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        return model.model_validate(raw)
    except PydanticValidationError as exc:
        fields = [".".join(str(p) for p in err["loc"]) for err in exc.errors()]
        raise ValidationError(f"Invalid {model.__name__}: {', '.join(fields)}", fields=fields) from exc
