from fastapi import APIRouter

from coaching_app.api.v1.endpoints import team_members, teams, feedback


api_router = APIRouter()

api_router.include_router(team_members.router, prefix="/members", tags=["members"])
api_router.include_router(teams.router, prefix="/teams", tags=["teams"])
api_router.include_router(feedback.router, prefix="/feedback", tags=["feedback"])
