import logging

from sqlalchemy.orm import Session

from coaching_app.core.database import commit_or_raise
from coaching_app.models import team_member as models_team_member
from coaching_app.schemas import team_member as schemas_team_member

logger = logging.getLogger(__name__)


def get_team_member(db: Session, member_id: int):
    return db.query(models_team_member.TeamMember).filter(models_team_member.TeamMember.id == member_id).first()

def get_team_members(db: Session):
    return db.query(models_team_member.TeamMember).order_by(models_team_member.TeamMember.id).all()

def create_team_member(db: Session, member: schemas_team_member.TeamMemberCreate):
    db_member = models_team_member.TeamMember(**member.model_dump())
    db.add(db_member)
    commit_or_raise(db, f"A team member with email '{member.email}' already exists")
    db.refresh(db_member)
    logger.info(f"Created team member {db_member.id}")
    return db_member

def update_team_member(db: Session, member_id: int, member: schemas_team_member.TeamMemberUpdate):
    db_member = get_team_member(db, member_id)
    if db_member:
        update_data = member.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            setattr(db_member, key, value)
        commit_or_raise(db, f"A team member with email '{update_data.get('email')}' already exists")
        db.refresh(db_member)
    return db_member

def delete_team_member(db: Session, member_id: int):
    """Delete a member and its team assignments. Feedback about the member is kept."""
    db_member = get_team_member(db, member_id)
    if db_member:
        db.delete(db_member)
        commit_or_raise(db, f"Team member {member_id} could not be deleted")
        logger.info(f"Deleted team member {member_id}")
    return db_member
