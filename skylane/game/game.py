# skylane/game/game.py
import sys, argparse, logging
import pygame
from pygame import K_SPACE, K_RETURN, K_ESCAPE, K_r, K_n, K_h
from .config import (
    HEIGHT, FPS, SEED_DEFAULT,
    COLOR_BG, COLOR_FG, COLOR_CRAFT, COLOR_CRASH, COLOR_HITBOX,
)
from .collision import hitbox
from .controls import KeyboardInput
from .scheduler import FixedStepScheduler
from .simulation import Simulation, RunState, random_seed
from .viewport import detect_playfield_width

logger = logging.getLogger(__name__)


def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None,
                   help="Obstacle seed. Omit for SEED_DEFAULT, use -1 for random each run.")
    p.add_argument("--viewport", choices=["auto", "narrow", "wide"], default="auto",
                   help="Playfield size class (auto picks from the desktop width).")
    p.add_argument("--log-level", default="INFO",
                   help="Python logging level (DEBUG shows spawn/pass events).")
    return p.parse_args()


def draw_frame(screen, font, sim: Simulation, restart_rect, show_hitboxes: bool):
    screen.fill(COLOR_BG)
    sim.field.draw(screen)

    color_craft = COLOR_CRASH if sim.terminal else COLOR_CRAFT
    pygame.draw.rect(screen, color_craft, sim.craft.rect, border_radius=6)

    if show_hitboxes:
        pygame.draw.rect(screen, COLOR_HITBOX, hitbox(sim.craft.rect), width=1)
        for ob in sim.field.obstacles:
            pygame.draw.rect(screen, COLOR_HITBOX, hitbox(ob.rect), width=1)

    hud = f"Score: {sim.score}   Level: {sim.level}   Speed: {sim.scroll_speed:.2f}"
    screen.blit(font.render(hud, True, COLOR_FG), (10, 8))
    screen.blit(font.render(f"Seed: {sim.seed}", True, (160, 180, 210)), (10, 28))

    if sim.run_state is RunState.NOT_STARTED:
        msg = font.render("SPACE / ENTER to start   <- -> steer", True, COLOR_FG)
        screen.blit(msg, (sim.playfield_width // 2 - msg.get_width() // 2, HEIGHT // 2))

    if sim.terminal:
        pygame.draw.rect(screen, (40, 60, 90), restart_rect, border_radius=10)
        pygame.draw.rect(screen, (90, 130, 180), restart_rect, width=2, border_radius=10)

        over = font.render(f"Crashed! Score {sim.score}", True, (220, 235, 255))
        screen.blit(over, (restart_rect.centerx - over.get_width() // 2,
                           restart_rect.top + 8))
        btn_txt = font.render("Restart (R)", True, (220, 235, 255))
        screen.blit(btn_txt, (restart_rect.centerx - btn_txt.get_width() // 2,
                              restart_rect.centery - btn_txt.get_height() // 2 + 4))
        btn_txt2 = font.render("New Random (N)", True, (220, 235, 255))
        screen.blit(btn_txt2, (restart_rect.centerx - btn_txt2.get_width() // 2,
                               restart_rect.bottom - btn_txt2.get_height() - 8))


def run():
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Resolve seed: None -> use SEED_DEFAULT; -1 -> random per run
    if args.seed is None:
        seed_spec = SEED_DEFAULT
    elif args.seed == -1:
        seed_spec = None
    else:
        seed_spec = args.seed

    pygame.init()
    width = detect_playfield_width(None if args.viewport == "auto" else args.viewport)
    pygame.display.set_caption("Skylane")
    screen = pygame.display.set_mode((width, HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("jetbrainsmono", 18)

    sim = Simulation(playfield_width=width, seed=seed_spec)
    sim.on_terminal(lambda snap: logger.info("game over: score=%d level=%d", snap.score, snap.level))
    scheduler = FixedStepScheduler(sim, KeyboardInput())
    show_hitboxes = False

    btn_w, btn_h = 220, 100
    restart_rect = pygame.Rect((width - btn_w) // 2, (HEIGHT - btn_h) // 2, btn_w, btn_h)

    while True:
        dt = clock.tick(FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key in (K_SPACE, K_RETURN) and sim.run_state is RunState.NOT_STARTED:
                    sim.start()
                if event.key == K_h:
                    show_hitboxes = not show_hitboxes
                if event.key == K_r and sim.terminal:
                    # Restart SAME seed
                    sim.restart(seed=sim.seed)
                if event.key == K_n and sim.terminal:
                    sim.restart(seed=random_seed())
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and sim.terminal:
                if restart_rect.collidepoint(event.pos):
                    sim.restart(seed=sim.seed)

        scheduler.advance(dt)

        draw_frame(screen, font, sim, restart_rect, show_hitboxes)
        pygame.display.flip()


if __name__ == "__main__":
    run()
