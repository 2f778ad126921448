from fastapi import APIRouter, Depends

from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.booking.app.command.report_issue_use_case import ReportIssueUseCase
from movie_booking.service.booking.driving_adapter.http_controller.schema.issue_report_schema import (
    IssueReportRequest,
    IssueReportResponse,
)


router = APIRouter()


@router.post('/send-email')
@Logger.io
async def send_issue_report(
    request: IssueReportRequest,
    use_case: ReportIssueUseCase = Depends(ReportIssueUseCase.depends),
) -> IssueReportResponse:
    # NotifyError is rendered as {success: false, message} by the exception handler
    await use_case.execute(
        name=request.name,
        email=request.email,
        roll_number=request.roll_number,
        issue=request.issue,
    )
    return IssueReportResponse()
