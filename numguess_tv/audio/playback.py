import logging
import numpy as np

LOG = logging.getLogger("numguess.audio")

SAMPLE_RATE = 22050


def make_click(samplerate=SAMPLE_RATE, duration=0.03, freq=1800.0, volume=0.3):
    """Short sine burst with an exponential decay, as float32 mono samples."""
    count = max(1, int(samplerate * duration))
    t = np.arange(count, dtype=np.float32) / samplerate
    envelope = np.exp(-t * (5.0 / duration))
    wave = np.sin(2 * np.pi * freq * t) * envelope
    volume = max(0.0, min(1.0, float(volume)))
    return (wave * volume).astype(np.float32)


class ClickPlayer:
    def __init__(self, enabled=True, volume=0.3, device=None):
        self.enabled = enabled
        self.device = device if device else None
        self._samples = make_click(volume=volume)
        self._sd = None

    def _backend(self):
        if self._sd is None:
            # PortAudio is loaded on import and may be missing on headless boxes
            import sounddevice as sd

            self._sd = sd
        return self._sd

    def play(self):
        if not self.enabled:
            return
        try:
            sd = self._backend()
            # returns immediately; the stream runs on its own thread
            sd.play(self._samples, SAMPLE_RATE, device=self.device)
        except Exception as exc:
            LOG.warning("Click sound disabled: %s", exc)
            self.enabled = False

    def stop(self):
        if self._sd is None:
            return
        try:
            self._sd.stop()
        except Exception:
            LOG.debug("sounddevice stop failed", exc_info=True)
