"""Push notification gateway for AWS SNS with DynamoDB device token lookup."""
