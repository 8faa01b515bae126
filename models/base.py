from pydantic import BaseModel, ConfigDict, ValidationError
from typing import Any, Optional, TypeVar

ModelT = TypeVar("ModelT", bound="BaseGolfModel")


class BaseGolfModel(BaseModel):
    """Validated on construction and on every assignment."""
    model_config = ConfigDict(validate_assignment=True)

    def update_field(self, field_name: str, value: Any) -> Optional[str]:
        """Set one field. Returns the validation message instead of raising."""
        try:
            setattr(self, field_name, value)
            return None
        except ValidationError as e:
            return f"{field_name}: {e.errors()[0]['msg']}"

    def updated(self: ModelT, **changes: Any) -> ModelT:
        """Validated copy with ``changes`` applied; the original is left alone."""
        return type(self).model_validate({**self.model_dump(), **changes})
