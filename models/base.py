from pydantic import BaseModel, ConfigDict, ValidationError
from typing import Any, Optional

class ClubModel(BaseModel):
    """Shared configuration for club, event and match records."""
    model_config = ConfigDict(validate_assignment=True)

    def update_field(self, field_name: str, value: Any) -> Optional[str]:
        """Apply an edit from a form. Returns "<field>: <message>" if the value is rejected.

        A rejected value leaves the record unchanged.
        """
        try:
            setattr(self, field_name, value)
            return None
        except ValidationError as e:
            return f"{field_name}: {e.errors()[0]['msg']}"
