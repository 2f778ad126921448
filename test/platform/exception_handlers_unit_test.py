"""HTTP rendering of the error hierarchy, exercised through a throwaway app."""

from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel
import pytest

from movie_booking.platform.exception.exception_handlers import register_exception_handlers
from movie_booking.platform.exception.exceptions import (
    GatewayError,
    InternalError,
    NotFoundError,
    NotifyError,
    ReceiptError,
    SeatConflictError,
    VerificationError,
)


pytestmark = pytest.mark.unit


class _Payload(BaseModel):
    amount: float


def _build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    errors = {
        'conflict': SeatConflictError('Some seats are already blocked', seats=['A1']),
        'verification': VerificationError(),
        'not-found': NotFoundError('Booking not found'),
        'gateway': GatewayError('Error creating order'),
        'receipt': ReceiptError('Error generating QR code'),
        'internal': InternalError(),
        'notify': NotifyError(),
        'value': ValueError('bad value'),
    }

    @app.get('/raise/{kind}')
    async def raise_error(kind: str) -> None:
        raise errors[kind]

    @app.post('/validate')
    async def validate(payload: _Payload) -> dict:
        return {'amount': payload.amount}

    return app


@pytest.fixture(scope='module')
def http() -> TestClient:
    return TestClient(_build_app())


class TestExceptionHandlers:
    @pytest.mark.parametrize(
        ('kind', 'status_code', 'message'),
        [
            ('conflict', 400, 'Some seats are already blocked'),
            ('verification', 400, 'Payment verification failed'),
            ('not-found', 404, 'Booking not found'),
            ('gateway', 502, 'Error creating order'),
            ('receipt', 500, 'Error generating QR code'),
            ('internal', 500, 'Internal server error'),
            ('value', 400, 'bad value'),
        ],
    )
    def test_errors_render_message_body(self, http, kind, status_code, message):
        response = http.get(f'/raise/{kind}')

        assert response.status_code == status_code
        assert response.json() == {'message': message}

    def test_notify_error_keeps_success_envelope(self, http):
        response = http.get('/raise/notify')

        assert response.status_code == 500
        assert response.json() == {'success': False, 'message': 'Error sending email'}

    def test_request_validation_is_400(self, http):
        response = http.post('/validate', json={'amount': 'lots'})

        assert response.status_code == 400
        body = response.json()
        assert body['message'] == 'Invalid request'
        assert body['detail'][0]['loc'] == ['body', 'amount']
