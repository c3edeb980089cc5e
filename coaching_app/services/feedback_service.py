import logging
from typing import Optional

from sqlalchemy.orm import Session

from coaching_app.core.database import commit_or_raise
from coaching_app.core.exceptions import NotFoundError
from coaching_app.models import feedback as models_feedback, team as models_team, team_member as models_team_member
from coaching_app.schemas import feedback as schemas_feedback
from coaching_app.schemas.feedback import FeedbackTarget, TargetType

logger = logging.getLogger(__name__)

# Table and not-found message for every kind of feedback target
TARGET_MODELS = {
    TargetType.TEAM: (models_team.Team, "Target team not found"),
    TargetType.MEMBER: (models_team_member.TeamMember, "Target member not found"),
}


def get_target(db: Session, target: FeedbackTarget):
    model, not_found_message = TARGET_MODELS[target.kind]
    db_target = db.query(model).filter(model.id == target.id).first()
    if db_target is None:
        raise NotFoundError(not_found_message)
    return db_target

def create_feedback(db: Session, feedback: schemas_feedback.FeedbackCreate):
    get_target(db, feedback.target)

    db_feedback = models_feedback.Feedback(
        content=feedback.content,
        targetid=feedback.targetid,
        targettype=feedback.targettype.value,
    )
    db.add(db_feedback)
    commit_or_raise(db, "Failed to create feedback")
    db.refresh(db_feedback)
    logger.info(f"Recorded feedback {db_feedback.id} for {feedback.targettype.value} {feedback.targetid}")
    return db_feedback

def get_feedbacks(db: Session, member_id: Optional[int] = None, team_id: Optional[int] = None):
    """List feedback, narrowed to one target when exactly one of member_id/team_id is given."""
    query = db.query(models_feedback.Feedback)

    target = None
    if member_id is not None and team_id is None:
        target = FeedbackTarget(TargetType.MEMBER, member_id)
    elif team_id is not None and member_id is None:
        target = FeedbackTarget(TargetType.TEAM, team_id)

    if target is not None:
        query = query.filter(
            models_feedback.Feedback.targettype == target.kind.value,
            models_feedback.Feedback.targetid == target.id,
        )
    return query.order_by(models_feedback.Feedback.id).all()
