from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class ContactMessage(BaseModel):
    name: str = Field(min_length=2, description="Sender name")
    email: EmailStr
    subject: str = Field(min_length=5)
    message: str = Field(min_length=10)

    def template_params(self) -> dict:
        return {
            "name": self.name,
            "email": str(self.email),
            "subject": self.subject,
            "message": self.message,
        }


class ContactResponse(BaseModel):
    status: str = "sent"
    detail: Optional[str] = None
