# game_view.py
from __future__ import annotations
import logging
import arcade

from controls import primary_intent, tap_intent
from entities import Posture, posture_size
from simulation import Simulation, Snapshot, Intent, Phase, format_score
from settings import (
    SPAWN_INTERVAL,
    DAY_BG, DAY_FG, DAY_CLOUD, NIGHT_BG, NIGHT_FG, NIGHT_CLOUD,
)

logger = logging.getLogger(__name__)


class GameView(arcade.View):
    """Draws the simulation and feeds it ticks and input intents.

    The simulation works in y-down logical units; everything here is flipped
    into arcade's y-up screen space at draw time.
    """

    def __init__(self, simulation: Simulation):
        super().__init__()
        self.simulation = simulation

        # --- Text ---
        self.score_text = arcade.Text("", 0, 0, DAY_FG, 14, anchor_x="right")
        self.over_text = arcade.Text("GAME OVER", 0, 0, DAY_FG, 24, anchor_x="center")
        self.hint_text = arcade.Text("Press SPACE to restart", 0, 0, DAY_FG, 12, anchor_x="center")
        self._layout_text()

    def _layout_text(self):
        w, h = self.simulation.world.width, self.simulation.world.height
        self.score_text.x, self.score_text.y = w - 16, h - 30
        self.over_text.x, self.over_text.y = w / 2, h / 2 + 10
        self.hint_text.x, self.hint_text.y = w / 2, h / 2 - 24

    def reinitialize(self, width: int, height: int):
        self.simulation.resize(width, height)
        self._layout_text()

    # ---------- Clock ----------
    def on_show_view(self):
        arcade.schedule(self._spawn_tick, SPAWN_INTERVAL)

    def on_hide_view(self):
        arcade.unschedule(self._spawn_tick)

    def _spawn_tick(self, delta_time: float):
        self.simulation.spawn_tick(delta_time)

    def on_update(self, delta_time: float):
        self.simulation.update()

    def on_resize(self, width: int, height: int):
        world = self.simulation.world
        if (width, height) == (world.width, world.height):
            return
        self.reinitialize(width, height)
        from start_view import StartView
        self.window.show_view(StartView(self))

    # ---------- Input ----------
    def _apply(self, intent: Intent):
        if self.simulation.handle(intent):
            logger.debug("Intent %s accepted", intent.name)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in (arcade.key.SPACE, arcade.key.UP):
            self._apply(primary_intent(self.simulation.phase))
        elif symbol == arcade.key.DOWN:
            self._apply(Intent.DUCK_PRESSED)
        elif symbol == arcade.key.ESCAPE:
            self.window.close()

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol == arcade.key.DOWN:
            self._apply(Intent.DUCK_RELEASED)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self._apply(tap_intent(self.simulation.phase, y, self.simulation.world.height))

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self._apply(Intent.DUCK_RELEASED)

    # ---------- Draw ----------
    def on_draw(self):
        snap = self.simulation.snapshot()
        bg, fg, cloud_col = (DAY_BG, DAY_FG, DAY_CLOUD) if snap.is_daytime else (NIGHT_BG, NIGHT_FG, NIGHT_CLOUD)
        self.clear(color=bg)

        for c in snap.clouds:
            self._circle(c.x, c.y, c.width / 4, cloud_col)
            self._circle(c.x + c.width / 3, c.y - 5, c.width / 3, cloud_col)
            self._circle(c.x + c.width * 0.7, c.y, c.width / 4, cloud_col)

        # Ground line + texture
        self._rect(0, snap.ground_y, snap.width, 2, fg)
        for t in snap.ground_tiles:
            self._rect(t.x, snap.ground_y + 8, t.width, 2, fg)

        self._draw_player(snap, fg, bg)
        for ob in snap.ground_obstacles:
            self._draw_cactus(ob.x, ob.y, ob.width, ob.height, fg)
        for bird in snap.flying_obstacles:
            self._draw_bird(bird.x, bird.y, bird.wing_frame, fg)

        # UI
        for text in (self.score_text, self.over_text, self.hint_text):
            text.color = fg
        self.score_text.text = f"HI {format_score(snap.high_score)}  {format_score(snap.score)}"
        self.score_text.draw()
        if snap.phase is Phase.GAME_OVER:
            self.over_text.draw()
            self.hint_text.draw()

    def _rect(self, x: float, y: float, w: float, h: float, color):
        """Fill a y-down logical rectangle."""
        bottom = self.simulation.world.height - (y + h)
        arcade.draw_lbwh_rectangle_filled(x, bottom, w, h, color)

    def _circle(self, x: float, y: float, r: float, color):
        arcade.draw_circle_filled(x, self.simulation.world.height - y, r, color)

    def _draw_player(self, snap: Snapshot, fg, bg):
        p = snap.player
        x, y = p.x, p.y
        if p.posture is Posture.DUCKING:
            w, _ = posture_size(p.posture)
            self._rect(x, y + 4, w - 8, 18, fg)        # body
            self._rect(x + 38, y, 20, 16, fg)          # head
            self._rect(x + 50, y + 4, 5, 5, bg)        # eye
            self._rect(x + 8, y + 22, 8, 6, fg)
            self._rect(x + 30, y + 22, 8, 6, fg)
            return

        self._rect(x + 10, y + 8, 24, 26, fg)          # body
        self._rect(x + 18, y, 26, 14, fg)              # head
        self._rect(x + 34, y + 3, 6, 6, bg)            # eye
        self._rect(x, y + 18, 12, 6, fg)               # arm
        self._rect(x + 2, y + 12, 10, 8, fg)           # tail
        if p.airborne:
            legs = (14, 14)
        elif p.run_frame == 0:
            legs = (14, 6)
        else:
            legs = (6, 14)
        self._rect(x + 10, y + 34, 8, legs[0], fg)
        self._rect(x + 24, y + 34, 8, legs[1], fg)

    def _draw_cactus(self, x: float, y: float, w: float, h: float, fg):
        self._rect(x + w / 3, y, w / 3, h, fg)
        if w > 25:
            self._rect(x, y + h * 0.3, w / 3, h * 0.2, fg)
            self._rect(x, y + h * 0.3, w / 5, h * 0.4, fg)
            self._rect(x + w * 0.7, y + h * 0.4, w / 3, h * 0.15, fg)
            self._rect(x + w * 0.8, y + h * 0.2, w / 5, h * 0.35, fg)

    def _draw_bird(self, x: float, y: float, wing_frame: int, fg):
        self._rect(x + 8, y + 10, 30, 14, fg)          # body
        self._rect(x + 34, y + 8, 12, 12, fg)          # head
        self._rect(x + 42, y + 12, 4, 4, fg)           # beak
        self._rect(x, y + 12, 10, 6, fg)               # tail
        wing_y = y if wing_frame == 0 else y + 22
        self._rect(x + 14, wing_y, 16, 10, fg)
