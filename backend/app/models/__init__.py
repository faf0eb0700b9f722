from app.models.event import Event
from app.models.player import Player
from app.models.game import Game
