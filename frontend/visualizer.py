"""Pygame front-end: start screen, live match, game-over banner."""

try:
    import pygame
except ImportError:
    pygame = None

from hexpong.simulation import Simulation
from hexpong.opponents import BEHAVIORS
from hexpong.types import PLAYER
from hexpong import match as referee
from hexpong import arena

WIN_W = 800
WIN_H = 660
HUD_H = 60
FPS = 60

# Colors
BG_COLOR = (26, 26, 26)
HUD_BG = (17, 24, 39)
WALL_GRAY = (51, 51, 51)
BALL_WHITE = (255, 255, 255)
BOLT_LIGHT = (75, 158, 244)
BOLT_DARK = (44, 94, 165)
TEXT_WHITE = (224, 224, 224)
TEXT_DIM = (156, 163, 175)
OVERLAY = (0, 0, 0, 140)


def _bolt_points(cx, cy, size=200):
    return [
        (cx, cy - size / 2),
        (cx + size / 3, cy),
        (cx - size / 4, cy + size / 4),
        (cx, cy + size / 2),
        (cx - size / 3, cy),
        (cx + size / 4, cy - size / 4),
    ]


def _to_screen(x, y):
    return int(x), int(y) + HUD_H


def _draw_arena(surface, snap):
    surface.fill(BG_COLOR)
    hexagon = [_to_screen(x, y) for x, y in snap.hexagon]
    pygame.draw.polygon(surface, WALL_GRAY, hexagon, 2)

    bolt = [_to_screen(x, y) for x, y in _bolt_points(arena.CENTER_X, arena.CENTER_Y)]
    pygame.draw.polygon(surface, BOLT_DARK, bolt)
    pygame.draw.polygon(surface, BOLT_LIGHT, bolt, 3)

    radius = int(arena.PADDLE_DRAW_RADIUS)
    for paddle in snap.paddles:
        pygame.draw.circle(surface, paddle.color, _to_screen(paddle.x, paddle.y), radius)

    pygame.draw.circle(surface, BALL_WHITE, _to_screen(*snap.ball), int(arena.BALL_RADIUS))


def _draw_hud(surface, snap, font):
    pygame.draw.rect(surface, HUD_BG, (0, 0, WIN_W, HUD_H))
    player_score, robot_scores = snap.score
    colors = [p.color for p in snap.paddles if p.paddle_id != PLAYER]
    player_color = next(p.color for p in snap.paddles if p.paddle_id == PLAYER)

    x = 16
    label = font.render(f"You: {player_score}", True, player_color)
    surface.blit(label, (x, 18))
    x += label.get_width() + 24
    for index, (robot_score, color) in enumerate(zip(robot_scores, colors)):
        # stealth navy is unreadable on the dark HUD
        shown = color if sum(color) > 150 else TEXT_DIM
        label = font.render(f"R{index + 1}: {robot_score}", True, shown)
        surface.blit(label, (x, 18))
        x += label.get_width() + 18


def _draw_center_text(surface, lines, fonts):
    total_h = sum(f.get_height() + 8 for f in fonts)
    y = (WIN_H - total_h) // 2
    for text, font, color in zip(lines, fonts, [TEXT_WHITE, TEXT_DIM, TEXT_DIM, TEXT_DIM]):
        rendered = font.render(text, True, color)
        surface.blit(rendered, ((WIN_W - rendered.get_width()) // 2, y))
        y += font.get_height() + 8


def run_visualizer(rng=None):
    """Launch the pygame window and play until the user quits."""
    if pygame is None:
        print("ERROR: pygame is not installed. Run: pip install pygame")
        return

    pygame.init()
    screen = pygame.display.set_mode((WIN_W, WIN_H))
    pygame.display.set_caption("Hexagon Pong — vs 5 Robots")
    clock = pygame.time.Clock()

    font_md = pygame.font.SysFont("monospace", 18, bold=True)
    font_sm = pygame.font.SysFont("monospace", 14)
    font_xl = pygame.font.SysFont("monospace", 34, bold=True)

    sim = Simulation(rng=rng)
    robot_names = ", ".join(profile["label"] for profile in BEHAVIORS.values())
    overlay = pygame.Surface((WIN_W, WIN_H), pygame.SRCALPHA)
    overlay.fill(OVERLAY)

    running = True
    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_q, pygame.K_ESCAPE):
                    running = False
                elif event.key == pygame.K_r:
                    sim.reset()
                elif event.key == pygame.K_SPACE:
                    if sim.phase == referee.OVER:
                        sim.reset()
                    else:
                        sim.start()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if sim.phase == referee.NOT_STARTED:
                    sim.start()
                elif sim.phase == referee.OVER:
                    sim.reset()
            elif event.type == pygame.MOUSEMOTION:
                sim.set_player_pointer(event.pos[0])

        snap = sim.step()
        _draw_arena(screen, snap)
        _draw_hud(screen, snap, font_md)

        if snap.phase == referee.NOT_STARTED:
            screen.blit(overlay, (0, 0))
            _draw_center_text(screen, [
                "Welcome to the Boltagon!",
                f"First to {arena.WINNING_SCORE} points wins. Guard the bottom side.",
                f"Face off against: {robot_names}",
                "Click or press SPACE to start",
            ], [font_xl, font_sm, font_sm, font_md])
        elif snap.phase == referee.OVER:
            screen.blit(overlay, (0, 0))
            champion = sim.winner()
            title = "You Win!" if champion == PLAYER else f"{sim.winner_label()} Robot Wins!"
            player_score, robot_scores = snap.score
            _draw_center_text(screen, [
                title,
                f"Final Score - You: {player_score} | Robots: {', '.join(map(str, robot_scores))}",
                "Click or press SPACE to play again",
            ], [font_xl, font_sm, font_md])

        pygame.display.flip()

    pygame.quit()
