from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from coaching_app.core.database import Base

class TeamMember(Base):
    __tablename__ = "team_members"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    pictureurl = Column(String(1024), nullable=True)
    email = Column(String(255), unique=True, index=True, nullable=False)

    teams = relationship("Team", secondary="team_member_assignments", back_populates="members")
