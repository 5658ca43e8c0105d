#main.py

import pygame
import cProfile
import pstats
import constants as C
from scene import Scene
from ui import draw_hud
import logger

def initialize_viewer():
    logger.log("Attempting to initialize Pygame...")
    pygame.init()
    logger.log("Pygame initialized successfully.")
    logger.log(f"Creating display surface with width: {C.SCREEN_WIDTH} and height: {C.SCREEN_HEIGHT}")
    screen = pygame.display.set_mode((C.SCREEN_WIDTH, C.SCREEN_HEIGHT))
    pygame.display.set_caption("BaryTree Viewer")
    font = pygame.font.Font(None, C.UI_FONT_SIZE)
    logger.log("Display surface and font created.")
    return screen, font

def run_viewer():
    screen, font = initialize_viewer()
    clock = pygame.time.Clock()
    scene = Scene()
    logger.set_tree(scene.tree)
    scene.populate(screen, font)

    logger.log("Starting main viewer loop...")
    logger.log("CONTROLS: [LMB] Insert, [RMB] Query corner, [R] Random batch, [C] Clear query, [D] Toggle points, [G] Save plots.")

    running = True
    while running:
        clock.tick(C.CLOCK_TICK_RATE)

        for event in pygame.event.get():
            if event.type == pygame.QUIT: running = False
            if event.type == pygame.MOUSEBUTTONDOWN:
                if event.button in (1, 3): scene.handle_click(event.pos, event.button)
                elif event.button == 4: scene.camera.zoom_in(event.pos)
                elif event.button == 5: scene.camera.zoom_out(event.pos)
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_r: scene.add_random_batch()
                if event.key == pygame.K_c: scene.clear_query()
                if event.key == pygame.K_d: scene.toggle_point_drawing()
                if event.key == pygame.K_g: scene.save_graphs()
                if event.key == pygame.K_ESCAPE: running = False

        keys = pygame.key.get_pressed()
        if keys[pygame.K_LEFT]: scene.camera.pan(-C.CAMERA_PANSPEED_PIXELS, 0)
        if keys[pygame.K_RIGHT]: scene.camera.pan(C.CAMERA_PANSPEED_PIXELS, 0)
        if keys[pygame.K_UP]: scene.camera.pan(0, -C.CAMERA_PANSPEED_PIXELS)
        if keys[pygame.K_DOWN]: scene.camera.pan(0, C.CAMERA_PANSPEED_PIXELS)

        screen.fill(C.COLOR_VOID)
        scene.draw(screen)
        draw_hud(screen, font, scene.hud_lines())

        pygame.display.flip()

    logger.log("Main viewer loop ended.")

def shutdown_viewer():
    logger.log("Quitting Pygame...")
    pygame.quit()
    logger.log("Viewer closed cleanly.")

def main():
    logger.log("--- Viewer Start ---")
    run_viewer()
    shutdown_viewer()
    logger.log("--- Viewer Exit ---")

if __name__ == '__main__':
    profiler = cProfile.Profile()
    try:
        profiler.run('main()')
    except SystemExit:
        # This allows the viewer to exit cleanly without a profiler error
        pass
    finally:
        print("\n\n--- PROFILER REPORT ---")
        stats = pstats.Stats(profiler)
        stats.sort_stats(pstats.SortKey.CUMULATIVE)
        stats.print_stats(C.PROFILER_PRINT_LINE_COUNT)
