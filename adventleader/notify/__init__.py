"""
Notification

Modules:
- gate: Decides whether a cycle posts
- webex: Posts markdown messages to the chat room
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "should_notify":
        from adventleader.notify.gate import should_notify
        return should_notify
    if name == "post_message":
        from adventleader.notify.webex import post_message
        return post_message
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
