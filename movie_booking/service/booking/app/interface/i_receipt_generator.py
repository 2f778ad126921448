from abc import ABC, abstractmethod


class IReceiptGenerator(ABC):
    @abstractmethod
    async def generate(self, *, content: str) -> str:
        """
        Encode `content` as a scannable receipt.

        Returns:
            Image data URL (e.g. "data:image/png;base64,...")

        Raises:
            ReceiptError: encoding failed
        """
        pass
