from abc import ABC, abstractmethod


class IIssueNotifier(ABC):
    @abstractmethod
    async def send_issue_report(self, *, subject: str, body: str) -> None:
        """
        Deliver an issue report to the support mailbox.

        Raises:
            NotifyError: delivery failed
        """
        pass
