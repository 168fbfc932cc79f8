from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

def require_text(value: str | None, message: str) -> str:
    if value is None or not value.strip():
        raise PydanticCustomError("blank", message)
    return value
