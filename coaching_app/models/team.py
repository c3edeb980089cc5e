from sqlalchemy import Column, Integer, String, ForeignKey, Table
from sqlalchemy.orm import relationship
from coaching_app.core.database import Base

# Composite key keeps a member from being assigned to the same team twice
team_member_assignments = Table(
    'team_member_assignments',
    Base.metadata,
    Column('team_id', Integer, ForeignKey('teams.id', ondelete='CASCADE'), primary_key=True),
    Column('member_id', Integer, ForeignKey('team_members.id', ondelete='CASCADE'), primary_key=True)
)

class Team(Base):
    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, index=True, nullable=False)
    logourl = Column(String(1024), nullable=True)

    members = relationship(
        "TeamMember",
        secondary=team_member_assignments,
        back_populates="teams",
        order_by="TeamMember.id",
    )
