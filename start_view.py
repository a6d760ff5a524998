# start_view.py
import arcade

from game_view import GameView
from simulation import Intent
from settings import TITLE, DAY_FG

OVERLAY = (247, 247, 247, 200)


class StartView(arcade.View):
    """Start screen drawn over the idle game; any primary input begins the run."""

    def __init__(self, game_view: GameView):
        super().__init__()
        self.game_view = game_view
        self.title = arcade.Text(TITLE.upper(), 0, 0, DAY_FG, 28, anchor_x="center")
        self.hint = arcade.Text("SPACE / UP / tap = start & jump    DOWN = duck",
                                0, 0, DAY_FG, 12, anchor_x="center")
        self._layout()

    def _layout(self):
        world = self.game_view.simulation.world
        self.title.x, self.title.y = world.width / 2, world.height / 2 + 20
        self.hint.x, self.hint.y = world.width / 2, world.height / 2 - 16

    def on_draw(self):
        # Idle game behind a light overlay
        self.game_view.on_draw()
        world = self.game_view.simulation.world
        arcade.draw_lbwh_rectangle_filled(0, 0, world.width, world.height, OVERLAY)
        self.title.draw()
        self.hint.draw()

    def on_resize(self, width: int, height: int):
        world = self.game_view.simulation.world
        if (width, height) != (world.width, world.height):
            self.game_view.reinitialize(width, height)
            self._layout()

    def _start(self):
        self.game_view.simulation.handle(Intent.START)
        self.window.show_view(self.game_view)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in (arcade.key.SPACE, arcade.key.UP):
            self._start()
        elif symbol == arcade.key.ESCAPE:
            self.window.close()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self._start()
