"""``clickup-cli chat``: channels, messages, reactions and replies (v3)."""

from typing import List, Optional

import typer

from clickup_cli.cli.common import done, get_state, output, run
from clickup_cli.models import (
    CreateChatChannelRequest,
    CreateDMRequest,
    CreateLocationChannelRequest,
    CreateReactionRequest,
    ParentType,
    SendMessageRequest,
    UpdateChannelRequest,
    UpdateMessageRequest,
)

app = typer.Typer(no_args_is_help=True, help="Chat operations (needs a workspace ID).")

CHANNEL_COLUMNS = [
    ("ID", lambda ch: ch.id),
    ("NAME", lambda ch: ch.name),
    ("TYPE", lambda ch: ch.type),
    ("MEMBER_COUNT", lambda ch: ch.member_count),
]

MESSAGE_COLUMNS = [
    ("ID", lambda m: m.id),
    ("USER_ID", lambda m: m.user_id),
    ("DATE", lambda m: m.date_created),
    ("CONTENT", lambda m: m.content),
]

USER_COLUMNS = [("ID", lambda u: u.id), ("USERNAME", lambda u: u.username)]

REACTION_COLUMNS = [
    ("ID", lambda r: r.id),
    ("REACTION", lambda r: r.reaction),
    ("USER_ID", lambda r: r.user_id),
]


# ---------------------------------------------------------------------------
# Channels
# ---------------------------------------------------------------------------

@app.command()
def channels(ctx: typer.Context):
    """List chat channels."""
    result = run(ctx, lambda c: c.chat.list_channels())
    output(ctx, result, result.channels, CHANNEL_COLUMNS, title="Channels")


@app.command()
def channel(ctx: typer.Context, channel_id: str = typer.Argument(..., help="Channel ID.")):
    """Get channel details."""
    ch = run(ctx, lambda c: c.chat.get_channel(channel_id))
    output(ctx, ch, [ch], CHANNEL_COLUMNS)


@app.command("channel-followers")
def channel_followers(ctx: typer.Context, channel_id: str = typer.Argument(..., help="Channel ID.")):
    """List channel followers."""
    result = run(ctx, lambda c: c.chat.followers(channel_id))
    output(ctx, result, result.users, USER_COLUMNS, title="Followers")


@app.command("channel-members")
def channel_members(ctx: typer.Context, channel_id: str = typer.Argument(..., help="Channel ID.")):
    """List channel members."""
    result = run(ctx, lambda c: c.chat.members(channel_id))
    output(ctx, result, result.users, USER_COLUMNS, title="Members")


@app.command("create-channel")
def create_channel(ctx: typer.Context, name: str = typer.Argument(..., help="Channel name.")):
    """Create a channel."""
    ch = run(ctx, lambda c: c.chat.create_channel(CreateChatChannelRequest(name=name)))
    output(ctx, ch, [ch], CHANNEL_COLUMNS)


@app.command("create-dm")
def create_dm(ctx: typer.Context, members: List[str] = typer.Argument(..., help="User IDs.")):
    """Create a direct message channel."""
    ch = run(ctx, lambda c: c.chat.create_dm(CreateDMRequest(members=members)))
    output(ctx, ch, [ch], CHANNEL_COLUMNS)


@app.command("create-location-channel")
def create_location_channel(
    ctx: typer.Context,
    parent_type: ParentType = typer.Argument(..., help="space, folder or list."),
    parent_id: str = typer.Argument(..., help="Parent ID."),
    name: Optional[str] = typer.Option(None, help="Channel name."),
):
    """Create a channel attached to a space, folder or list."""
    req = CreateLocationChannelRequest(name=name, parent_type=parent_type.value, parent_id=parent_id)
    ch = run(ctx, lambda c: c.chat.create_location(req))
    output(ctx, ch, [ch], CHANNEL_COLUMNS)


@app.command("update-channel")
def update_channel(
    ctx: typer.Context,
    channel_id: str = typer.Argument(..., help="Channel ID."),
    name: str = typer.Option(..., help="New name."),
):
    """Rename a channel."""
    ch = run(ctx, lambda c: c.chat.update_channel(channel_id, UpdateChannelRequest(name=name)))
    output(ctx, ch, [ch], CHANNEL_COLUMNS)


@app.command("delete-channel")
def delete_channel(ctx: typer.Context, channel_id: str = typer.Argument(..., help="Channel ID.")):
    """Delete a channel."""
    run(ctx, lambda c: c.chat.delete_channel(channel_id))
    done(ctx, f"Channel {channel_id} deleted", channel_id=channel_id)


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

@app.command()
def messages(
    ctx: typer.Context,
    channel_id: str = typer.Argument(..., help="Channel ID."),
    limit: int = typer.Option(0, help="Maximum messages to return."),
    cursor: str = typer.Option("", help="Page token from a previous call."),
):
    """List channel messages, one page at a time."""
    result = run(ctx, lambda c: c.chat.list_messages(channel_id, limit=limit, cursor=cursor))
    output(ctx, result, result.data, MESSAGE_COLUMNS, title="Messages")
    token = result.pagination.next_page_token if result.pagination else None
    if token and not get_state(ctx).mode.json:
        typer.echo(f"Next page: --cursor {token}", err=True)


@app.command()
def send(
    ctx: typer.Context,
    channel_id: str = typer.Argument(..., help="Channel ID."),
    content: str = typer.Argument(..., help="Message text."),
):
    """Send a message."""
    msg = run(ctx, lambda c: c.chat.send_message(channel_id, SendMessageRequest(content=content)))
    output(ctx, msg, [msg], MESSAGE_COLUMNS)


@app.command("update-message")
def update_message(
    ctx: typer.Context,
    message_id: str = typer.Argument(..., help="Message ID."),
    content: str = typer.Argument(..., help="New text."),
):
    """Edit a message."""
    msg = run(ctx, lambda c: c.chat.update_message(message_id, UpdateMessageRequest(content=content)))
    output(ctx, msg, [msg], MESSAGE_COLUMNS)


@app.command("delete-message")
def delete_message(ctx: typer.Context, message_id: str = typer.Argument(..., help="Message ID.")):
    """Delete a message."""
    run(ctx, lambda c: c.chat.delete_message(message_id))
    done(ctx, f"Message {message_id} deleted", message_id=message_id)


# ---------------------------------------------------------------------------
# Reactions, replies, mentions
# ---------------------------------------------------------------------------

@app.command()
def reactions(ctx: typer.Context, message_id: str = typer.Argument(..., help="Message ID.")):
    """List reactions on a message."""
    result = run(ctx, lambda c: c.chat.reactions(message_id))
    output(ctx, result, result.reactions, REACTION_COLUMNS, title="Reactions")


@app.command()
def react(
    ctx: typer.Context,
    message_id: str = typer.Argument(..., help="Message ID."),
    reaction: str = typer.Argument(..., help="Reaction (emoji name)."),
):
    """Add a reaction."""
    r = run(ctx, lambda c: c.chat.create_reaction(message_id, CreateReactionRequest(reaction=reaction)))
    output(ctx, r, [r], REACTION_COLUMNS)


@app.command()
def unreact(
    ctx: typer.Context,
    message_id: str = typer.Argument(..., help="Message ID."),
    reaction_id: str = typer.Argument(..., help="Reaction ID."),
):
    """Remove a reaction."""
    run(ctx, lambda c: c.chat.delete_reaction(message_id, reaction_id))
    done(ctx, "Reaction removed", message_id=message_id, reaction_id=reaction_id)


@app.command()
def replies(ctx: typer.Context, message_id: str = typer.Argument(..., help="Message ID.")):
    """List replies to a message."""
    result = run(ctx, lambda c: c.chat.replies(message_id))
    output(ctx, result, result.data, MESSAGE_COLUMNS, title="Replies")


@app.command()
def reply(
    ctx: typer.Context,
    message_id: str = typer.Argument(..., help="Message ID."),
    content: str = typer.Argument(..., help="Reply text."),
):
    """Reply to a message."""
    msg = run(ctx, lambda c: c.chat.create_reply(message_id, SendMessageRequest(content=content)))
    output(ctx, msg, [msg], MESSAGE_COLUMNS)


@app.command("tagged-users")
def tagged_users(ctx: typer.Context, message_id: str = typer.Argument(..., help="Message ID.")):
    """List users mentioned in a message."""
    result = run(ctx, lambda c: c.chat.tagged_users(message_id))
    output(ctx, result, result.users, USER_COLUMNS, title="Tagged Users")
