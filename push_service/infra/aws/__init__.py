"""AWS service wrappers (SNS publish, DynamoDB token table)."""

from push_service.infra.aws.dynamodb import TokenTable, composite_key
from push_service.infra.aws.sns import SnsPublisher

__all__ = ["SnsPublisher", "TokenTable", "composite_key"]
