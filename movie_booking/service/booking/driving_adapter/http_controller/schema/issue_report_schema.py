from pydantic import BaseModel, Field


class IssueReportRequest(BaseModel):
    model_config = {
        'populate_by_name': True,
        'json_schema_extra': {
            'example': {
                'name': 'Asha',
                'email': 'asha@example.com',
                'rollNumber': '21CS042',
                'issue': 'QR code did not load after payment',
            }
        },
    }

    name: str
    email: str
    roll_number: str = Field(alias='rollNumber')
    issue: str


class IssueReportResponse(BaseModel):
    success: bool = True
    message: str = 'Email sent successfully!'
