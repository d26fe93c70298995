# renderer/preview.py
import os
import numpy as np

# stdout may carry the PPM stream; keep pygame's import banner off it.
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame

def show_image(pixels: np.ndarray, title: str = "Path Tracer"):
    """
    Display 8-bit pixels (height x width x 3, top row first) in a window
    until it is closed or Escape is pressed.
    """
    height, width = pixels.shape[0], pixels.shape[1]
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        # surfarray expects (width, height, 3).
        frame_surface = pygame.surfarray.make_surface(np.transpose(pixels, (1, 0, 2)))
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(frame_surface, (0, 0))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()
