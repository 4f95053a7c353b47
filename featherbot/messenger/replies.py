"""Static reply texts."""

HOWTO_TEXT = (
    "Give me the name of a FB page! You can write https://www.facebook.com/facebook, "
    "facebook, https://facebook.com/Birds-of-a-Feather-2179257909023050 "
    "or 2179257909023050"
)

HELP_TEXT = HOWTO_TEXT

GREETING_TEXT = (
    "Hello. I am here to help you explore if pages of a feather flock together "
    "on Facebook. Blurt out a page name, or type help for some fluffy instructions."
)

ATTACHMENT_TEXT = "What is all the fluff with attachments? Blurt out a page name instead."

QUICK_REPLY_TEXT = "Quick reply tapped"

AUTHENTICATION_TEXT = "Authentication successful"

GETSTARTED_PAYLOAD = "GETSTARTED_PAYLOAD"
HOWTO_PAYLOAD = "HOWTO_PAYLOAD"

POSTBACK_REPLIES: dict[str, str] = {
    GETSTARTED_PAYLOAD: GREETING_TEXT,
    HOWTO_PAYLOAD: HOWTO_TEXT,
}

HELP_KEYWORDS = frozenset({"help"})
PRIVACY_KEYWORDS = frozenset({"privacy", "policy", "privacy policy"})


def privacy_policy_text(url: str) -> str:
    return f"My privacy policy is available here: {url}"
