"""Sample payloads for testing."""

from typing import Any

# Sample Linear webhook payload for a newly created issue
LINEAR_ISSUE_CREATE: dict[str, Any] = {
    "action": "create",
    "type": "Issue",
    "actor": {
        "id": "user_123",
        "type": "user",
        "name": "Jane Smith",
        "email": "jane.smith@example.com",
        "url": "https://linear.app/acme/profiles/jane",
    },
    "createdAt": "2024-10-19T14:30:00.000Z",
    "data": {
        "id": "issue_456",
        "title": "Login button does nothing",
        "description": "Clicking *Login* on the landing page has no effect.",
        "priority": 0,
        "estimate": 2,
        "createdAt": "2024-10-19T14:30:00.000Z",
        "updatedAt": "2024-10-19T14:30:00.000Z",
        "number": 42,
        "url": "https://linear.app/acme/issue/ENG-42/login-button-does-nothing",
        "identifier": "ENG-42",
        "state": {
            "id": "state_todo",
            "name": "Todo",
            "type": "unstarted",
            "color": "#e2e2e2",
        },
        "team": {"id": "team_eng", "name": "Engineering", "key": "ENG"},
        "creator": {"id": "user_123", "name": "Jane Smith", "email": "jane.smith@example.com"},
        "labels": [{"id": "label_bug", "name": "Bug", "color": "#eb5757"}],
    },
    "url": "https://linear.app/acme/issue/ENG-42/login-button-does-nothing",
    "webhookTimestamp": 1729348200000,
    "webhookId": "webhook_789",
    "organizationId": "org_abc",
}

# Sample Linear webhook payload for an issue moved to another state
LINEAR_ISSUE_UPDATE: dict[str, Any] = {
    "action": "update",
    "type": "Issue",
    "actor": {"id": "user_123", "type": "user", "name": "Jane Smith"},
    "createdAt": "2024-10-19T15:00:00.000Z",
    "data": {
        "id": "issue_456",
        "title": "Login button does nothing",
        "priority": 2,
        "dueDate": "2024-10-25",
        "number": 42,
        "url": "https://linear.app/acme/issue/ENG-42/login-button-does-nothing",
        "identifier": "ENG-42",
        "state": {
            "id": "state_progress",
            "name": "In Progress",
            "type": "started",
            "color": "#f2c94c",
        },
        "team": {"id": "team_eng", "name": "Engineering", "key": "ENG"},
        "assignee": {"id": "user_999", "name": "John Doe", "email": "john.doe@example.com"},
    },
    "updatedFrom": {
        "updatedAt": "2024-10-19T14:30:00.000Z",
        "stateId": "state_todo",
        "state": {"id": "state_todo", "name": "Todo"},
    },
    "url": "https://linear.app/acme/issue/ENG-42/login-button-does-nothing",
    "webhookTimestamp": 1729350000000,
    "webhookId": "webhook_790",
    "organizationId": "org_abc",
}

# Sample Linear webhook payload for a new comment
LINEAR_COMMENT_CREATE: dict[str, Any] = {
    "action": "create",
    "type": "Comment",
    "actor": {"id": "user_999", "type": "user", "name": "John Doe"},
    "createdAt": "2024-10-19T15:10:00.000Z",
    "data": {
        "id": "comment_001",
        "body": "Reproduced on Safari 17. Looks like the click handler isn't bound.",
        "createdAt": "2024-10-19T15:10:00.000Z",
        "updatedAt": "2024-10-19T15:10:00.000Z",
        "edited": False,
        "issueId": "issue_456",
        "userId": "user_999",
        "user": {"id": "user_999", "name": "John Doe", "email": "john.doe@example.com"},
    },
    "url": "https://linear.app/acme/issue/ENG-42#comment-001",
    "webhookTimestamp": 1729350600000,
    "webhookId": "webhook_791",
    "organizationId": "org_abc",
}

# Sample Linear webhook payload for a new project
LINEAR_PROJECT_CREATE: dict[str, Any] = {
    "action": "create",
    "type": "Project",
    "actor": {"id": "user_123", "type": "user", "name": "Jane Smith"},
    "createdAt": "2024-10-19T16:00:00.000Z",
    "data": {
        "id": "project_001",
        "name": "Q4 Auth Revamp",
        "description": "Replace the legacy login flow.",
        "state": "planned",
        "priority": 1,
        "createdAt": "2024-10-19T16:00:00.000Z",
        "updatedAt": "2024-10-19T16:00:00.000Z",
        "lead": {"id": "user_123", "name": "Jane Smith", "email": "jane.smith@example.com"},
        "teams": [{"id": "team_eng", "name": "Engineering", "key": "ENG"}],
    },
    "url": "https://linear.app/acme/project/q4-auth-revamp",
    "webhookTimestamp": 1729353600000,
    "webhookId": "webhook_792",
    "organizationId": "org_abc",
}

# Sample Linear webhook payload for an entity type without a dedicated renderer
LINEAR_ISSUE_LABEL_CREATE: dict[str, Any] = {
    "action": "create",
    "type": "IssueLabel",
    "actor": {"id": "user_123", "type": "user", "name": "Jane Smith"},
    "createdAt": "2024-10-19T16:30:00.000Z",
    "data": {"id": "label_perf", "name": "Performance", "color": "#5e6ad2"},
    "url": "https://linear.app/acme/settings/labels",
    "webhookTimestamp": 1729355400000,
    "webhookId": "webhook_793",
    "organizationId": "org_abc",
}

# Sample Telegram update carrying a bot command
TELEGRAM_STATUS_COMMAND: dict[str, Any] = {
    "update_id": 100001,
    "message": {
        "message_id": 55,
        "from": {"id": 7001, "is_bot": False, "first_name": "Jane"},
        "chat": {"id": -1001234567890, "type": "supergroup", "title": "Engineering"},
        "date": 1729355400,
        "text": "/status",
        "entities": [{"offset": 0, "length": 7, "type": "bot_command"}],
    },
}
