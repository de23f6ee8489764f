"""Adapter.

``AudioPlayer`` only knows mp3. ``MediaAdapter`` makes the advanced players
fit the same ``play(audio_type, file_name)`` call.
"""

from __future__ import annotations

from typing import Protocol

from ..registry import scenario


class MediaPlayer(Protocol):
    def play(self, audio_type: str, file_name: str) -> None: ...


class AdvancedMediaPlayer(Protocol):
    def play_vlc(self, file_name: str) -> None: ...

    def play_mp4(self, file_name: str) -> None: ...


class VlcPlayer:
    def play_vlc(self, file_name: str) -> None:
        print(f"Playing vlc file. Name: {file_name}")

    def play_mp4(self, file_name: str) -> None:
        pass


class Mp4Player:
    def play_vlc(self, file_name: str) -> None:
        pass

    def play_mp4(self, file_name: str) -> None:
        print(f"Playing mp4 file. Name: {file_name}")


class MediaAdapter:
    def __init__(self, audio_type: str) -> None:
        self._advanced: AdvancedMediaPlayer | None = None
        kind = audio_type.lower()
        if kind == "vlc":
            self._advanced = VlcPlayer()
        elif kind == "mp4":
            self._advanced = Mp4Player()

    def play(self, audio_type: str, file_name: str) -> None:
        if self._advanced is None:
            return
        kind = audio_type.lower()
        if kind == "vlc":
            self._advanced.play_vlc(file_name)
        elif kind == "mp4":
            self._advanced.play_mp4(file_name)


class AudioPlayer:
    def play(self, audio_type: str, file_name: str) -> bool:
        """Play ``file_name``; returns False when the media type is rejected."""
        kind = audio_type.lower()
        if kind == "mp3":
            print(f"Playing mp3 file. Name: {file_name}")
        elif kind in ("vlc", "mp4"):
            MediaAdapter(audio_type).play(audio_type, file_name)
        else:
            print(f"Invalid media. {audio_type} format not supported")
            return False
        return True


@scenario("adapter", category="structural", title="Adapter")
def main() -> None:
    player = AudioPlayer()
    player.play("mp3", "beyond the horizon.mp3")
    player.play("mp4", "alone.mp4")
    player.play("vlc", "far far away.vlc")
    player.play("avi", "mind me.avi")


if __name__ == "__main__":
    main()

### OUTPUT ###
# Playing mp3 file. Name: beyond the horizon.mp3
# Playing mp4 file. Name: alone.mp4
# Playing vlc file. Name: far far away.vlc
# Invalid media. avi format not supported
