#ui.py

import pygame
import constants as C

def loading_text(progress, total, accepted):
    rejected = progress - accepted
    return f"Inserting points... {progress}/{total} ({accepted} stored, {rejected} rejected)"

def render_loading_screen(screen, font, progress, total, accepted):
    """
    Draws the insertion progress without flipping the display.
    The bar fills with stored points first, then with rejected ones.
    """
    screen.fill(C.COLOR_BLACK)

    text_surface = font.render(loading_text(progress, total, accepted), True, C.COLOR_WHITE)
    text_rect = text_surface.get_rect(center=(C.SCREEN_WIDTH / 2, C.SCREEN_HEIGHT / 2 - C.UI_LOADING_TEXT_OFFSET_Y))
    screen.blit(text_surface, text_rect)

    bar_x = (C.SCREEN_WIDTH - C.UI_LOADING_BAR_WIDTH) / 2
    bar_y = (C.SCREEN_HEIGHT - C.UI_LOADING_BAR_HEIGHT) / 2
    stored_width = C.UI_LOADING_BAR_WIDTH * (accepted / total if total else 1.0)
    rejected_width = C.UI_LOADING_BAR_WIDTH * ((progress - accepted) / total if total else 0.0)

    pygame.draw.rect(screen, C.COLOR_LOADING_BAR_BG, (bar_x, bar_y, C.UI_LOADING_BAR_WIDTH, C.UI_LOADING_BAR_HEIGHT))
    pygame.draw.rect(screen, C.COLOR_LOADING_BAR_FG, (bar_x, bar_y, stored_width, C.UI_LOADING_BAR_HEIGHT))
    pygame.draw.rect(screen, C.COLOR_LOADING_BAR_REJECTED,
                     (bar_x + stored_width, bar_y, rejected_width, C.UI_LOADING_BAR_HEIGHT))
    return text_rect

def draw_loading_screen(screen, font, progress, total, accepted):
    render_loading_screen(screen, font, progress, total, accepted)
    pygame.display.flip()

def draw_hud(screen, font, lines):
    """Draws one line of text per entry in the top-left corner."""
    for i, line in enumerate(lines):
        text_surface = font.render(line, True, C.COLOR_WHITE)
        screen.blit(text_surface, (C.UI_HUD_POS_X, C.UI_HUD_POS_Y + i * C.UI_HUD_LINE_SPACING))
