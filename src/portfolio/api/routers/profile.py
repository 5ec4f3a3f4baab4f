from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ...domain.models import AboutContent, ContactInfo, PersonalInfo, PortfolioData
from ...services.skills_service import SkillsMatrix, build_skills_matrix
from ..dependencies import get_portfolio_data

router = APIRouter(tags=["profile"])


class PersonalResponse(BaseModel):
    name: str
    title: str
    description: str
    avatar: Optional[str] = None

    @classmethod
    def from_dataclass(cls, personal: PersonalInfo) -> "PersonalResponse":
        return cls(
            name=personal.name,
            title=personal.title,
            description=personal.description,
            avatar=personal.avatar,
        )


class AboutResponse(BaseModel):
    summary: str
    experience: List[str] = []
    interests: List[str] = []

    @classmethod
    def from_dataclass(cls, about: AboutContent) -> "AboutResponse":
        return cls(summary=about.summary, experience=list(about.experience), interests=list(about.interests))


class SocialLinkResponse(BaseModel):
    platform: str
    url: str
    icon: str


class ContactInfoResponse(BaseModel):
    email: str
    phone: Optional[str] = None
    location: str
    response_time: str = "Usually within 24 hours"
    social: List[SocialLinkResponse] = []

    @classmethod
    def from_dataclass(cls, contact: ContactInfo) -> "ContactInfoResponse":
        return cls(
            email=contact.email,
            phone=contact.phone,
            location=contact.location,
            social=[SocialLinkResponse(platform=s.platform, url=s.url, icon=s.icon) for s in contact.social],
        )


@router.get("/profile", response_model=PersonalResponse)
def get_profile(data: PortfolioData = Depends(get_portfolio_data)) -> PersonalResponse:
    return PersonalResponse.from_dataclass(data.personal)


@router.get("/about", response_model=AboutResponse)
def get_about(data: PortfolioData = Depends(get_portfolio_data)) -> AboutResponse:
    return AboutResponse.from_dataclass(data.about)


@router.get("/skills", response_model=SkillsMatrix)
def get_skills(data: PortfolioData = Depends(get_portfolio_data)) -> SkillsMatrix:
    return build_skills_matrix(data.skills)


@router.get("/contact-info", response_model=ContactInfoResponse)
def get_contact_info(data: PortfolioData = Depends(get_portfolio_data)) -> ContactInfoResponse:
    return ContactInfoResponse.from_dataclass(data.contact)
