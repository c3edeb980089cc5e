import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from coaching_app.core.database import commit_or_raise
from coaching_app.core.exceptions import AssociationClearError
from coaching_app.models import team as models_team
from coaching_app.schemas import team as schemas_team

logger = logging.getLogger(__name__)


def get_team(db: Session, team_id: int):
    return db.query(models_team.Team).options(selectinload(models_team.Team.members)).filter(models_team.Team.id == team_id).first()

def get_teams(db: Session):
    # selectinload fetches every team's members in one extra query instead of one per team
    return db.query(models_team.Team).options(selectinload(models_team.Team.members)).order_by(models_team.Team.id).all()

def create_team(db: Session, team: schemas_team.TeamCreate):
    db_team = models_team.Team(**team.model_dump())
    db.add(db_team)
    commit_or_raise(db, f"A team named '{team.name}' already exists")
    db.refresh(db_team)
    logger.info(f"Created team {db_team.id} ({db_team.name})")
    return db_team

def update_team(db: Session, team_id: int, team: schemas_team.TeamUpdate):
    db_team = get_team(db, team_id)
    if db_team:
        update_data = team.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            setattr(db_team, key, value)
        commit_or_raise(db, f"A team named '{update_data.get('name')}' already exists")
        db.refresh(db_team)
    return db_team

def clear_team_members(db: Session, db_team: models_team.Team) -> None:
    """Remove every association row of the team without touching the member rows."""
    db_team.members.clear()
    db.flush()

def delete_team(db: Session, team_id: int):
    db_team = get_team(db, team_id)
    if db_team is None:
        return None

    try:
        clear_team_members(db, db_team)
    except SQLAlchemyError as exc:
        # Nothing has been committed yet, so the team and its associations are left intact
        db.rollback()
        logger.error(f"Could not clear members of team {team_id}: {exc}")
        raise AssociationClearError(str(exc)) from exc

    db.delete(db_team)
    commit_or_raise(db, f"Team {team_id} could not be deleted")
    logger.info(f"Deleted team {team_id}")
    return db_team
