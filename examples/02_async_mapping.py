"""
Example 02: Async Support

This example demonstrates asynchronous mappers and how both entry points
work regardless of the flavor a mapper was registered with.
"""

import asyncio
from dataclasses import dataclass

from custom_mapper import MappingRegistry, ObjectMapper


@dataclass
class User:
    id: int
    name: str


@dataclass
class UserProfile:
    id: int
    name: str
    avatar_url: str


registry = MappingRegistry()
mapper = ObjectMapper(registry)


@mapper.mapping(User, UserProfile)
async def user_to_profile(user, include_children):
    await asyncio.sleep(0.05)  # e.g. fetching the avatar from a remote service
    return UserProfile(id=user.id, name=user.name, avatar_url=f"https://cdn.example/{user.id}.png")


async def main():
    print("=== Async Mapping ===\n")

    print("1. Async entry point:")
    profile = await mapper.map_async(User(1, "Alice"), UserProfile)
    print(f"   {profile}\n")

    print("2. Concurrent mapping:")
    profiles = await asyncio.gather(*(mapper.map_async(User(i, f"user{i}"), UserProfile) for i in range(3)))
    for p in profiles:
        print(f"   - {p.name}: {p.avatar_url}")
    print()

    print("3. Async list mapping:")
    profiles = await mapper.map_many_async([User(7, "Grace"), User(8, "Linus")], UserProfile)
    print(f"   Mapped {len(profiles)} users\n")


if __name__ == "__main__":
    asyncio.run(main())

    # The sync entry point blocks until the async mapper finishes.
    print("4. Sync entry point on an async mapper:")
    print(f"   {mapper.map(User(2, 'Bob'), UserProfile)}")
