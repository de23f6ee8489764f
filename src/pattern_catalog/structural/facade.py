"""Facade: ``Computer.start()`` hides the boot sequence of its parts."""

from __future__ import annotations

from ..registry import scenario


class CPU:
    def freeze(self) -> None:
        print("Freezing.")

    def jump(self, position: int) -> None:
        print(f"Jump to {position}.")

    def execute(self) -> None:
        print("Executing.")


class HardDrive:
    def read(self, lba: int, size: int) -> bytes:
        return b""


class Memory:
    def load(self, position: int, data: bytes) -> None:
        print(f"Loading from memory position: {position}")


class Computer:
    # placeholder boot constants, all zero
    BOOT_ADDRESS = 0
    BOOT_SECTOR = 0
    SECTOR_SIZE = 0

    def __init__(
        self,
        processor: CPU | None = None,
        ram: Memory | None = None,
        hd: HardDrive | None = None,
    ) -> None:
        self._processor = processor or CPU()
        self._ram = ram or Memory()
        self._hd = hd or HardDrive()

    def start(self) -> None:
        self._processor.freeze()
        self._ram.load(self.BOOT_ADDRESS, self._hd.read(self.BOOT_SECTOR, self.SECTOR_SIZE))
        self._processor.jump(self.BOOT_ADDRESS)
        self._processor.execute()


@scenario("facade", category="structural", title="Facade")
def main() -> None:
    Computer().start()


if __name__ == "__main__":
    main()

### OUTPUT ###
# Freezing.
# Loading from memory position: 0
# Jump to 0.
# Executing.
