import math
import random

import pygame

from pocketpet.constants import (
    COLOR_DEAD,
    COLOR_HEALTH,
    COLOR_PET_BODY,
    COLOR_PET_EYES,
    COLOR_SICK,
    COLOR_TEXT,
    YELLOW,
)
from pocketpet.models import PetPhase, PetStatus

PHASE_RADIUS = {
    PetPhase.BABY: 25,
    PetPhase.TODDLER: 32,
    PetPhase.TEEN: 40,
    PetPhase.ADULT: 48,
    PetPhase.SPECIAL: 48,
}


class PetSprite:
    """Animation state and drawing for the active pet. Holds no game state."""
    def __init__(self):
        self.idle_bob_offset = 0.0
        self.idle_bob_timer = 0.0
        self.bounce_timer = 0.0
        self.eye_timer = 0.0
        self.eye_blink_duration = 0.1
        self.eyes_open = True

    def update(self, dt, pet):
        self.idle_bob_timer = (self.idle_bob_timer + dt) % (math.pi * 2)
        self.idle_bob_offset = math.sin(self.idle_bob_timer * 3) * 2
        self.bounce_timer = (self.bounce_timer + dt * 10) % (math.pi * 2)

        # Blinking
        if pet.status != PetStatus.SLEEPING:
            self.eye_timer += dt
            if self.eyes_open:
                if self.eye_timer > 3.0 + (random.random() * 2.0):
                    self.eyes_open = False
                    self.eye_timer = 0.0
            elif self.eye_timer > self.eye_blink_duration:
                self.eyes_open = True
                self.eye_timer = 0.0

    def body_color(self, pet):
        base_color = COLOR_PET_BODY
        # Fade towards grey as health drops
        if pet.health < 50:
            ratio = 1.0 - (pet.health / 50.0)
            return tuple(int(c + (100 - c) * ratio) for c in base_color)
        return base_color

    def draw(self, surface, pet, cx, cy, font):
        radius = PHASE_RADIUS[pet.phase]

        if pet.dead:
            pygame.draw.ellipse(surface, COLOR_DEAD, (cx - radius, cy - radius // 2 + 10, radius * 2, radius))
            dead_text = font.render("REST IN PEACE", True, (255, 0, 0))
            surface.blit(dead_text, dead_text.get_rect(center=(cx, cy)))
            return

        color = self.body_color(pet)
        scale_x, scale_y = 1.0, 1.0
        y_offset = 0

        if pet.status == PetStatus.IDLE:
            squash = math.sin(self.idle_bob_timer * 3)
            scale_x, scale_y = 1.0 + squash * 0.05, 1.0 - squash * 0.05
        elif pet.status == PetStatus.EATING:
            scale_x, scale_y = 0.9, 0.9
            color = tuple(max(0, c - 20) for c in color)
        elif pet.status in (PetStatus.PLAYING, PetStatus.DANCING):
            y_offset = math.sin(self.bounce_timer) * 4
            color = tuple(min(255, c + 30) for c in color)

        radius_x, radius_y = radius * scale_x, radius * scale_y
        body_w, body_h = radius_x * 1.8, radius_y * 1.6
        body_cy = cy + self.idle_bob_offset + y_offset
        pygame.draw.ellipse(surface, color, pygame.Rect(cx - body_w // 2, body_cy - body_h // 2, body_w, body_h))

        if pet.phase == PetPhase.SPECIAL:
            # Halo
            pygame.draw.circle(surface, YELLOW, (int(cx), int(body_cy - body_h // 2 - 10)), radius // 4, 2)

        # Eyes
        eye_y = body_cy - radius_y // 3
        eye_w, eye_h = radius_x // 4, radius_y // 3
        if pet.status == PetStatus.SLEEPING:
            zzz = font.render("Zzz", True, COLOR_TEXT)
            surface.blit(zzz, zzz.get_rect(center=(cx + radius + 5, body_cy - radius)))
            pygame.draw.line(surface, COLOR_PET_EYES, (cx - eye_w, eye_y), (cx - eye_w // 2, eye_y), 2)
            pygame.draw.line(surface, COLOR_PET_EYES, (cx + eye_w // 2, eye_y), (cx + eye_w, eye_y), 2)
        elif self.eyes_open:
            pygame.draw.ellipse(surface, COLOR_PET_EYES, (cx - eye_w * 1.5, eye_y - eye_h // 2, eye_w, eye_h))
            pygame.draw.ellipse(surface, COLOR_PET_EYES, (cx + eye_w * 0.5, eye_y - eye_h // 2, eye_w, eye_h))
        else:
            pygame.draw.line(surface, COLOR_PET_EYES, (cx - eye_w * 1.5, eye_y), (cx - eye_w * 0.5, eye_y), 2)
            pygame.draw.line(surface, COLOR_PET_EYES, (cx + eye_w * 0.5, eye_y), (cx + eye_w * 1.5, eye_y), 2)

        # Mouth
        mouth_y = body_cy + radius_y // 3
        mouth_w = radius_x // 3
        if pet.mood > 68:
            pygame.draw.arc(surface, COLOR_PET_EYES, pygame.Rect(cx - mouth_w // 2, mouth_y - 5, mouth_w, 10), math.pi, 2 * math.pi, 2)
        elif pet.mood < 33:
            pygame.draw.arc(surface, COLOR_PET_EYES, pygame.Rect(cx - mouth_w // 2, mouth_y, mouth_w, 10), 0, math.pi, 2)
        else:
            pygame.draw.line(surface, COLOR_PET_EYES, (cx - mouth_w // 2, mouth_y), (cx + mouth_w // 2, mouth_y), 2)

        if pet.status == PetStatus.DANCING:
            note = font.render("la la", True, COLOR_HEALTH)
            surface.blit(note, note.get_rect(center=(cx - radius * 1.3, body_cy - radius)))

        if pet.sick:
            sick_sym = font.render("X", True, COLOR_SICK)
            surface.blit(sick_sym, sick_sym.get_rect(center=(cx, body_cy - body_h * 0.75)))
