from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from coaching_app.core.dependencies import get_db
from coaching_app.services import feedback_service
from coaching_app.schemas import feedback as schemas_feedback
from coaching_app.schemas.common import MIN_ID, MAX_ID

router = APIRouter()

@router.post("", response_model=schemas_feedback.Feedback, status_code=status.HTTP_201_CREATED)
def give_feedback(feedback: schemas_feedback.FeedbackCreate, db: Session = Depends(get_db)):
    return feedback_service.create_feedback(db=db, feedback=feedback)

@router.get("", response_model=List[schemas_feedback.Feedback])
def read_feedbacks(
    member_id: Optional[int] = Query(None, ge=MIN_ID, le=MAX_ID, description="Only feedback about this member"),
    team_id: Optional[int] = Query(None, ge=MIN_ID, le=MAX_ID, description="Only feedback about this team"),
    db: Session = Depends(get_db),
):
    return feedback_service.get_feedbacks(db, member_id=member_id, team_id=team_id)
