from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.exception.exceptions import NotifyError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.platform.metrics.booking_metrics import metrics
from movie_booking.service.booking.app.interface.i_issue_notifier import IIssueNotifier


ISSUE_REPORT_SUBJECT = 'New Issue Reported'


def build_issue_report_body(*, name: str, email: str, roll_number: str, issue: str) -> str:
    return f'Name: {name}\nEmail: {email}\nRoll Number: {roll_number}\nIssue: {issue}'


class ReportIssueUseCase:
    def __init__(self, *, issue_notifier: IIssueNotifier) -> None:
        self.issue_notifier = issue_notifier

    @classmethod
    @inject
    def depends(
        cls,
        issue_notifier: IIssueNotifier = Depends(Provide[Container.issue_notifier]),
    ) -> Self:
        return cls(issue_notifier=issue_notifier)

    @Logger.io
    async def execute(self, *, name: str, email: str, roll_number: str, issue: str) -> None:
        body = build_issue_report_body(
            name=name, email=email, roll_number=roll_number, issue=issue
        )
        try:
            await self.issue_notifier.send_issue_report(subject=ISSUE_REPORT_SUBJECT, body=body)
        except NotifyError:
            metrics.record_issue_report(sent=False)
            raise
        metrics.record_issue_report(sent=True)
