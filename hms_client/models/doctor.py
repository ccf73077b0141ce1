from pydantic import BaseModel, ConfigDict, Field
from typing import List


class Doctor(BaseModel):
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    name: str
    specialty: str
    diseases: List[str] = Field(default_factory=list)

    def treats(self, term: str) -> bool:
        """Case-insensitive substring match against any disease keyword."""
        needle = term.lower()
        return any(needle in disease.lower() for disease in self.diseases)

    def __repr__(self):
        return f"<Doctor(id='{self.id}', name='{self.name}', specialty='{self.specialty}')>"
