import logging
import os
from datetime import datetime

import cv2
import numpy as np
import pygame

logger = logging.getLogger(__name__)

class VideoRecorder:
    """Writes viewer frames to an MP4 file while a maze is being solved."""

    def __init__(self, active=False, output_file=None, fps=30):
        self.active = active
        self.output_file = output_file
        self.fps = fps
        self.writer = None
        self.frame_size = None
        self.frame_count = 0

        if self.active and not self.output_file:
            ts = datetime.now().strftime("%Y%m%d_%H%M%S")
            fname = f"jungle_solve_{ts}.mp4"
            if os.path.isdir("recordings"):
                self.output_file = os.path.join("recordings", fname)
            else:
                self.output_file = fname

    def capture_frame(self, surface: pygame.Surface):
        if not self.active:
            return

        width, height = surface.get_size()
        if self.writer is None:
            self.frame_size = (width, height)
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, self.frame_size)
            logger.info(f"Recording started: {self.output_file}")
        elif (width, height) != self.frame_size:
            # VideoWriter silently drops frames of another size
            surface = pygame.transform.scale(surface, self.frame_size)

        # surfarray is (width, height, 3) RGB; OpenCV wants (height, width, 3) BGR
        frame = np.transpose(pygame.surfarray.array3d(surface), (1, 0, 2))
        frame = cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)
        self.writer.write(frame)
        self.frame_count += 1

    def stop(self):
        if self.writer:
            self.writer.release()
            logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames)")
            self.writer = None
