import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from coaching_app.core.exceptions import NotFoundError, StoreError
from coaching_app.services import team_member_service, team_service

logger = logging.getLogger(__name__)


def _get_team_and_member(db: Session, team_id: int, member_id: int):
    # Team is checked first so a missing team wins over a missing member
    team = team_service.get_team(db, team_id)
    if team is None:
        raise NotFoundError("Team not found")
    member = team_member_service.get_team_member(db, member_id)
    if member is None:
        raise NotFoundError("Team member not found")
    return team, member

def add_member_to_team(db: Session, team_id: int, member_id: int):
    """Assign a member to a team. Assigning an existing member is a no-op."""
    team, member = _get_team_and_member(db, team_id, member_id)
    if member in team.members:
        logger.debug(f"Member {member_id} already assigned to team {team_id}")
        return team

    team.members.append(member)
    try:
        db.commit()
    except IntegrityError:
        # A concurrent request inserted the same pair first
        db.rollback()
        logger.info(f"Member {member_id} was assigned to team {team_id} concurrently")
    except SQLAlchemyError as exc:
        db.rollback()
        raise StoreError(f"Failed to assign member to team: {exc}") from exc
    else:
        logger.info(f"Assigned member {member_id} to team {team_id}")
    return team

def remove_member_from_team(db: Session, team_id: int, member_id: int):
    """Unassign a member from a team. Removing a member that is not assigned is a no-op."""
    team, member = _get_team_and_member(db, team_id, member_id)
    if member not in team.members:
        return team

    team.members.remove(member)
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise StoreError(f"Failed to remove member from team: {exc}") from exc
    logger.info(f"Removed member {member_id} from team {team_id}")
    return team

def get_members_of_team(db: Session, team_id: int):
    team = team_service.get_team(db, team_id)
    if team is None:
        raise NotFoundError("Team not found")
    return team.members
