"""Telegram MarkdownV2 messages for Linear webhook events and bot commands."""

from __future__ import annotations

from dataclasses import dataclass

from structlog import get_logger

from app.models.webhooks import CommentData, IssueData, LinearWebhookEvent, ProjectData
from app.utils.markdown import escape_markdown, link, truncate_text
from app.utils.time import format_due_date

logger = get_logger()

DESCRIPTION_MAX_LENGTH = 300
COMMENT_MAX_LENGTH = 200
METADATA_SEPARATOR = " • "

PRIORITY_LABELS = {1: "Urgent", 2: "High", 3: "Medium", 4: "Low"}

ACTION_PAST_TENSE = {"create": "created", "update": "updated", "remove": "removed"}

ISSUE_HEADERS = {
    "create": "🆕 New issue",
    "update": "✏️ Issue updated",
    "remove": "🗑 Issue removed",
}
SUB_ISSUE_HEADER = "🧩 New sub-issue"

ENTITY_ICONS = {
    "Issue": "🎯",
    "Comment": "💬",
    "Project": "📁",
    "IssueLabel": "🏷️",
    "Cycle": "🔄",
    "User": "👤",
    "Reaction": "❤️",
}
DEFAULT_ENTITY_ICON = "📋"


class FormattingError(Exception):
    """Raised when a webhook payload can't be rendered."""


@dataclass(frozen=True)
class FormatResult:
    """Outcome of rendering an event: either text or the error that prevented it."""

    text: str | None = None
    error: FormattingError | None = None


def render_issue_message(event: LinearWebhookEvent, issue: IssueData) -> str:
    """
    Render an Issue event.

    Layout:
        header (depends on action, sub-issue on create with parent)
        [title](url) - creator
            ↳ parent: <parent title>            (if parent)
        priority • due date • status            (if any present)
        👤 assignee                             (if assigned)

        description excerpt                     (create only)
    """
    if event.action == "create" and issue.parent:
        header = SUB_ISSUE_HEADER
    else:
        header = ISSUE_HEADERS[event.action]

    author = issue.creator.name if issue.creator else event.actor.name

    lines = [
        escape_markdown(header),
        f"{link(issue.title, issue.url)} {escape_markdown(f'- {author}')}",
    ]

    if issue.parent:
        lines.append(f"    ↳ parent: {escape_markdown(issue.parent.title)}")

    metadata = _issue_metadata(event, issue)
    if metadata:
        lines.append(METADATA_SEPARATOR.join(escape_markdown(part) for part in metadata))

    if issue.assignee:
        lines.append(f"👤 {escape_markdown(issue.assignee.name)}")

    if event.action == "create" and issue.description:
        lines.append("")
        lines.append(escape_markdown(truncate_text(issue.description, DESCRIPTION_MAX_LENGTH)))

    return "\n".join(lines)


def _issue_metadata(event: LinearWebhookEvent, issue: IssueData) -> list[str]:
    """Unescaped metadata fragments in display order: priority, due date, status."""
    parts = []

    if issue.priority:
        label = PRIORITY_LABELS.get(issue.priority)
        if label:
            parts.append(label)

    if issue.dueDate:
        parts.append(format_due_date(issue.dueDate))

    if issue.state:
        previous = event.previous_state_name() if event.action == "update" else None
        if previous:
            parts.append(f"[{previous}] -> [{issue.state.name}]")
        else:
            parts.append(issue.state.name)

    return parts


def render_comment_message(event: LinearWebhookEvent, comment: CommentData) -> str:
    """Render a Comment event; the body excerpt is shown for create and update."""
    message = f"💬 New comment by {escape_markdown(event.actor.name)}"

    if event.action in ("create", "update"):
        excerpt = truncate_text(comment.body, COMMENT_MAX_LENGTH)
        message += f'\n"{escape_markdown(excerpt)}"'

    return message


def render_project_message(event: LinearWebhookEvent, project: ProjectData) -> str:
    """Render a Project event."""
    if event.action == "create":
        label = "New project"
    else:
        label = f"Project {ACTION_PAST_TENSE[event.action]}"

    return (
        f"📁 {label}: {escape_markdown(project.name)}\n"
        f"{escape_markdown(f'- {event.actor.name}')}"
    )


def render_generic_message(event: LinearWebhookEvent) -> str:
    """Render any entity type without a dedicated renderer as a single line."""
    icon = ENTITY_ICONS.get(event.type, DEFAULT_ENTITY_ICON)
    return (
        f"{icon} {escape_markdown(event.actor.name)} "
        f"{ACTION_PAST_TENSE[event.action]} a {escape_markdown(event.type.lower())}"
    )


def render_linear_message(event: LinearWebhookEvent) -> FormatResult:
    """
    Render a Linear event, capturing any failure as a FormattingError.

    The entity payload is validated against its typed model first, then
    handed to the renderer for that type. Entity types without a typed
    model go to the generic renderer.
    """
    try:
        entity = event.entity()

        if isinstance(entity, IssueData):
            text = render_issue_message(event, entity)
        elif isinstance(entity, CommentData):
            text = render_comment_message(event, entity)
        elif isinstance(entity, ProjectData):
            text = render_project_message(event, entity)
        else:
            text = render_generic_message(event)
    except Exception as e:
        error = FormattingError(f"Failed to render {event.type} {event.action}: {e}")
        error.__cause__ = e
        return FormatResult(error=error)

    return FormatResult(text=text)


def build_fallback_message(event: LinearWebhookEvent) -> str:
    """Short message used when an event can't be rendered."""
    return (
        f"❌ Error processing {escape_markdown(event.type)} "
        f"{escape_markdown(event.action)} from {escape_markdown(event.actor.name)}"
    )


def format_linear_message(event: LinearWebhookEvent) -> str:
    """
    Format a Linear webhook event as a Telegram MarkdownV2 message.

    Never raises: payloads that can't be rendered produce a fallback
    message naming the entity type, action and actor.

    Args:
        event: Verified Linear webhook event

    Returns:
        Non-empty MarkdownV2 text
    """
    result = render_linear_message(event)

    if result.error is not None or not result.text:
        logger.error(
            "message_formatting_failed",
            entity_type=event.type,
            action=event.action,
            webhook_id=event.webhookId,
            error=str(result.error),
            exc_info=result.error,
        )
        return build_fallback_message(event)

    return result.text


def build_start_message(chat_id: int | str) -> str:
    """Reply to /start: shows the chat id needed for TELEGRAM_CHAT_ID."""
    return (
        f"🚀 {escape_markdown('Linear Tracker Bot is now active!')}\n\n"
        f"Chat ID: `{chat_id}`\n\n"
        f"{escape_markdown('This bot sends notifications when Linear issues, comments and projects are created, updated or removed.')}\n\n"
        f"{escape_markdown('Point your Linear webhook to:')} `/webhooks/linear`"
    )


def build_help_message() -> str:
    """Reply to /help: supported events and commands."""
    return (
        "🤖 *Linear Tracker Bot Help*\n\n"
        f"{escape_markdown('This bot receives webhooks from Linear and posts formatted notifications to this chat.')}\n\n"
        "*Supported Linear events:*\n"
        f"• ✅ Issues {escape_markdown('(create, update, remove)')}\n"
        f"• 💬 Comments {escape_markdown('(create, update, remove)')}\n"
        f"• 📁 Projects {escape_markdown('(create, update, remove)')}\n"
        "• 🏷️ Labels and other entities\n\n"
        "*Commands:*\n"
        f"{escape_markdown('/start - Initialize the bot')}\n"
        f"{escape_markdown('/help - Show this help message')}\n"
        f"{escape_markdown('/status - Check bot status')}"
    )


def build_status_message(chat_id: int | str, configured_chat_id: str, environment: str) -> str:
    """Reply to /status: compares the current chat with the configured one."""
    is_correct_chat = str(chat_id) == configured_chat_id
    marker = "✅" if is_correct_chat else "❌"
    verdict = "Correct" if is_correct_chat else "Incorrect"

    return (
        "🤖 *Bot Status*\n\n"
        "✅ Bot is running\n"
        f"📱 Current Chat ID: `{chat_id}`\n"
        f"🎯 Configured Chat ID: `{configured_chat_id}`\n"
        f"{marker} Chat configuration: {verdict}\n\n"
        f"Environment: {escape_markdown(environment)}"
    )
