from coaching_app.services.team_member_service import (
    get_team_member,
    get_team_members,
    create_team_member,
    update_team_member,
    delete_team_member
)
from coaching_app.services.team_service import (
    get_team,
    get_teams,
    create_team,
    update_team,
    delete_team
)
from coaching_app.services.feedback_service import (
    create_feedback,
    get_feedbacks
)
from coaching_app.services.team_membership_service import (
    add_member_to_team,
    remove_member_from_team,
    get_members_of_team
)
