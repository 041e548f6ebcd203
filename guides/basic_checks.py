"""Simple example showing permit and permission checks."""

import asyncio

from permitkit import Denial, Permission, check_permit, is_permitted, require_permission

GRANTS = {"alice": {"reader", "editor"}, "bob": {"reader"}}


def privilege_for(username):
    def privilege(role):
        return role.value in GRANTS[username]

    return privilege


def article_permit(article):
    # Drafts need an editor, published articles only a reader
    return ["reader", "editor"] if article["draft"] else "reader"


async def main():
    """Basic permit checks."""
    draft = {"title": "Roadmap", "draft": True}

    for username in GRANTS:
        allowed = await is_permitted(article_permit, privilege_for(username), draft)
        print(f"📄 {username} may open '{draft['title']}': {allowed}")

    approval = await check_permit(article_permit, privilege_for("bob"), draft)
    print(f"🔍 Approval for bob: value={approval.value} error={approval.error!r}")

    publish = Permission.create(["editor"])
    try:
        await require_permission(publish, privilege_for("bob"), draft)
    except Denial as denial:
        print(f"⛔ bob cannot publish: {denial}")


if __name__ == "__main__":
    asyncio.run(main())
