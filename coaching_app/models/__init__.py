from coaching_app.models.team_member import TeamMember
from coaching_app.models.team import Team, team_member_assignments
from coaching_app.models.feedback import Feedback
