"""Example showing a tenant check delegated through a continuation role."""

import asyncio

from permitkit import ContinuationRegistry, Permission, Role, delegate, is_permitted

TENANT_ADMINS = {"acme": {"alice"}, "globex": {"bob"}}


def tenant_privilege(username, tenant):
    def privilege(role):
        return role.value == "tenant:admin" and username in TENANT_ADMINS[tenant]

    return privilege


def privilege_for(username, tenant):
    registry = ContinuationRegistry(unhandled="deny")
    registry.register("tenant", delegate(tenant_privilege(username, tenant)))
    return registry.privilege(base=lambda role: role.value == "member")


def invoice_permit(invoice):
    return [
        "member",
        Role.continuation("tenant", Permission.create("tenant:admin"), error="tenant admins only"),
    ]


async def main():
    invoice = {"id": "inv-42", "tenant": "acme"}

    for username in ("alice", "bob"):
        privilege = privilege_for(username, invoice["tenant"])
        allowed = await is_permitted(invoice_permit, privilege, invoice)
        print(f"🧾 {username} may approve {invoice['id']}: {allowed}")


if __name__ == "__main__":
    asyncio.run(main())
