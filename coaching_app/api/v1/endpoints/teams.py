from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy.orm import Session
from typing import List

from coaching_app.core.dependencies import get_db
from coaching_app.services import team_service, team_membership_service
from coaching_app.schemas import common as schemas_common, team as schemas_team, team_member as schemas_team_member
from coaching_app.schemas.common import MIN_ID, MAX_ID

router = APIRouter()

@router.post("", response_model=schemas_team.Team, status_code=status.HTTP_201_CREATED)
def create_team(team: schemas_team.TeamCreate, db: Session = Depends(get_db)):
    return team_service.create_team(db=db, team=team)

@router.get("", response_model=List[schemas_team.Team])
def read_teams(db: Session = Depends(get_db)):
    return team_service.get_teams(db)

@router.get("/{team_id}", response_model=schemas_team.Team)
def read_team(team_id: int = Path(..., ge=MIN_ID, le=MAX_ID), db: Session = Depends(get_db)):
    db_team = team_service.get_team(db, team_id=team_id)
    if db_team is None:
        raise HTTPException(status_code=404, detail="Team not found")
    return db_team

@router.put("/{team_id}", response_model=schemas_team.Team)
def update_team(team: schemas_team.TeamUpdate, team_id: int = Path(..., ge=MIN_ID, le=MAX_ID), db: Session = Depends(get_db)):
    db_team = team_service.update_team(db=db, team_id=team_id, team=team)
    if db_team is None:
        raise HTTPException(status_code=404, detail="Team not found")
    return db_team

@router.delete("/{team_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_team(team_id: int = Path(..., ge=MIN_ID, le=MAX_ID), db: Session = Depends(get_db)):
    db_team = team_service.delete_team(db, team_id=team_id)
    if db_team is None:
        raise HTTPException(status_code=404, detail="Team not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{team_id}/members", response_model=List[schemas_team_member.TeamMember])
def read_team_members(team_id: int = Path(..., ge=MIN_ID, le=MAX_ID), db: Session = Depends(get_db)):
    return team_membership_service.get_members_of_team(db=db, team_id=team_id)

@router.post("/{team_id}/assign/{member_id}", response_model=schemas_common.Message)
@router.post("/{team_id}/members/{member_id}", response_model=schemas_common.Message, include_in_schema=False)
def assign_team_member(team_id: int = Path(..., ge=MIN_ID, le=MAX_ID), member_id: int = Path(..., ge=MIN_ID, le=MAX_ID), db: Session = Depends(get_db)):
    team_membership_service.add_member_to_team(db=db, team_id=team_id, member_id=member_id)
    return {"message": "Member assigned to team successfully"}

@router.delete("/{team_id}/remove/{member_id}", response_model=schemas_common.Message)
@router.delete("/{team_id}/members/{member_id}", response_model=schemas_common.Message, include_in_schema=False)
def remove_team_member(team_id: int = Path(..., ge=MIN_ID, le=MAX_ID), member_id: int = Path(..., ge=MIN_ID, le=MAX_ID), db: Session = Depends(get_db)):
    team_membership_service.remove_member_from_team(db=db, team_id=team_id, member_id=member_id)
    return {"message": "Member removed from team successfully"}
