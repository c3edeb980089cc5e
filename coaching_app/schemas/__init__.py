from coaching_app.schemas.common import Message
from coaching_app.schemas.team_member import TeamMember, TeamMemberCreate, TeamMemberUpdate
from coaching_app.schemas.team import Team, TeamCreate, TeamUpdate
from coaching_app.schemas.feedback import Feedback, FeedbackCreate, FeedbackTarget, TargetType
