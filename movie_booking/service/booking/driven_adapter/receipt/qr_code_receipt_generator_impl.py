import base64
from io import BytesIO

import anyio.to_thread
import qrcode
from qrcode.constants import ERROR_CORRECT_M

from movie_booking.platform.exception.exceptions import ReceiptError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.booking.app.interface.i_receipt_generator import IReceiptGenerator


class QrCodeReceiptGeneratorImpl(IReceiptGenerator):
    """Renders the receipt text as a PNG QR code, returned as a data URL"""

    def __init__(self, *, box_size: int = 10, border: int = 4) -> None:
        self.box_size = box_size
        self.border = border

    def _render_png(self, content: str) -> bytes:
        qr = qrcode.QRCode(
            error_correction=ERROR_CORRECT_M,
            box_size=self.box_size,
            border=self.border,
        )
        qr.add_data(content)
        qr.make(fit=True)

        buffer = BytesIO()
        qr.make_image().save(buffer, format='PNG')
        return buffer.getvalue()

    @Logger.io(truncate_content=True)
    async def generate(self, *, content: str) -> str:
        try:
            png = await anyio.to_thread.run_sync(self._render_png, content)
        except Exception as e:
            Logger.base.error(f'❌ [RECEIPT] QR generation failed: {e}')
            raise ReceiptError('Error generating QR code') from e

        return f'data:image/png;base64,{base64.b64encode(png).decode("ascii")}'
