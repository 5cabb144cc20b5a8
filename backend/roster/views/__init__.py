from roster.views.body import (
    DecodedBody as DecodedBody,
)
from roster.views.body import (
    InvalidBodyError as InvalidBodyError,
)
from roster.views.body import (
    decode_player_body as decode_player_body,
)
from roster.views.player_handlers import (
    create_player as create_player,
)
from roster.views.player_handlers import (
    delete_player as delete_player,
)
from roster.views.player_handlers import (
    get_player as get_player,
)
from roster.views.player_handlers import (
    list_players as list_players,
)
from roster.views.player_handlers import (
    update_player as update_player,
)
