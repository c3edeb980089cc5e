from sqlalchemy import Column, Integer, String, Text, DateTime, Index, func
from coaching_app.core.database import Base

class Feedback(Base):
    __tablename__ = "feedbacks"

    id = Column(Integer, primary_key=True, index=True)
    content = Column(Text, nullable=False)
    # Polymorphic reference: targetid points into teams or team_members depending on targettype
    targetid = Column(Integer, nullable=False)
    targettype = Column(String(16), nullable=False)  # "team" or "member"
    created_at = Column(DateTime, server_default=func.now())

    __table_args__ = (
        Index("ix_feedbacks_target", "targettype", "targetid"),
    )
