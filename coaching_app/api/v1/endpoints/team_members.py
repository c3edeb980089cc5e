from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy.orm import Session
from typing import List

from coaching_app.core.dependencies import get_db
from coaching_app.services import team_member_service
from coaching_app.schemas import team_member as schemas_team_member
from coaching_app.schemas.common import MIN_ID, MAX_ID

router = APIRouter()

@router.post("", response_model=schemas_team_member.TeamMember, status_code=status.HTTP_201_CREATED)
def create_team_member(member: schemas_team_member.TeamMemberCreate, db: Session = Depends(get_db)):
    return team_member_service.create_team_member(db=db, member=member)

@router.get("", response_model=List[schemas_team_member.TeamMember])
def read_team_members(db: Session = Depends(get_db)):
    return team_member_service.get_team_members(db)

@router.get("/{member_id}", response_model=schemas_team_member.TeamMember)
def read_team_member(member_id: int = Path(..., ge=MIN_ID, le=MAX_ID), db: Session = Depends(get_db)):
    db_member = team_member_service.get_team_member(db, member_id=member_id)
    if db_member is None:
        raise HTTPException(status_code=404, detail="Team member not found")
    return db_member

@router.put("/{member_id}", response_model=schemas_team_member.TeamMember)
def update_team_member(member: schemas_team_member.TeamMemberUpdate, member_id: int = Path(..., ge=MIN_ID, le=MAX_ID), db: Session = Depends(get_db)):
    db_member = team_member_service.update_team_member(db, member_id=member_id, member=member)
    if db_member is None:
        raise HTTPException(status_code=404, detail="Team member not found")
    return db_member

@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_team_member(member_id: int = Path(..., ge=MIN_ID, le=MAX_ID), db: Session = Depends(get_db)):
    db_member = team_member_service.delete_team_member(db, member_id=member_id)
    if db_member is None:
        raise HTTPException(status_code=404, detail="Team member not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
