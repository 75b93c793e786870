from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field
from sqlalchemy import JSON, Column, DateTime, Float, Integer, String
from sqlalchemy.orm import Session

from db import Base


class RoiSimulation(Base):
    __tablename__ = "roi_simulations"
    __table_args__ = {'extend_existing': True}
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String, nullable=True)
    target_country = Column(String, nullable=False)
    budget = Column(Float, nullable=False)
    analysis_json = Column(JSON)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    @classmethod
    def record(cls, db: Session, user_id: Optional[str], target_country: str, budget: float, analysis: dict):
        obj = cls(
            user_id=user_id,
            target_country=target_country,
            budget=budget,
            analysis_json=analysis,
        )
        db.add(obj)
        db.flush()
        return obj

    @classmethod
    def for_user(cls, db: Session, user_id: str) -> List["RoiSimulation"]:
        return (
            db.query(cls)
            .filter_by(user_id=user_id)
            .order_by(cls.created_at.desc())
            .all()
        )


class ChatMessage(BaseModel):
    role: str
    content: str


class ChatRequest(BaseModel):
    messages: List[ChatMessage] = Field(default_factory=list)
    studentYear: Optional[str] = None


class ProfileRequest(BaseModel):
    profile: Optional[Dict[str, Any]] = None
    language: str = "en"


class RoiRequest(BaseModel):
    targetCountry: Optional[str] = None
    userBudget: Optional[float] = None
    userId: Optional[str] = None


class CareerPathRequest(BaseModel):
    userProfile: Optional[Dict[str, Any]] = None
    selectedPath: Optional[str] = None
