"""
Unit tests for the visibility resolver.
"""

import pytest

from app.domain.models.actor import Actor, Capability
from app.domain.models.project import Membership
from app.domain.models.user import User, UserStatus


class TestVisibilityResolver:
    """Test cases for VisibilityResolver tiers."""

    @pytest.mark.asyncio
    async def test_view_every_project_lists_active_users_and_open_projects(self, world):
        locked = await world.users.save(User(login="zed", firstname="Zed", status=UserStatus.LOCKED))

        scope = await world.resolver.resolve(await world.actor_for(world.root))

        assert locked.id not in scope.user_ids
        assert [u.login for u in scope.users] == ["alice", "bob", "carol", "dave", "root"]
        assert world.archive.id not in scope.project_ids
        assert set(scope.project_ids) == {world.website.id, world.backend.id, world.closed.id}

    @pytest.mark.asyncio
    async def test_global_capability_grants_every_project_tier(self, world):
        actor = Actor.from_memberships(
            world.carol, [],
            global_capabilities=[Capability.VIEW_EVERY_PROJECT_SPENT_TIME.value]
        )

        scope = await world.resolver.resolve(actor)

        assert len(scope.users) == 5
        assert not scope.is_unrestricted

    @pytest.mark.asyncio
    async def test_view_others_lists_co_members_once(self, world):
        scope = await world.resolver.resolve(await world.actor_for(world.alice))

        assert scope.user_ids == [world.alice.id, world.bob.id, world.carol.id]
        assert [p.name for p in scope.projects] == ["Backend", "Website"]

    @pytest.mark.asyncio
    async def test_view_others_skips_locked_co_members(self, world):
        locked = await world.users.save(User(login="zed", firstname="Zed", status=UserStatus.LOCKED))
        await world.projects.add_membership(Membership(locked.id, world.website.id, frozenset()))

        scope = await world.resolver.resolve(await world.actor_for(world.alice))

        assert locked.id not in scope.user_ids
        assert scope.user_ids == [world.alice.id, world.bob.id, world.carol.id]

    @pytest.mark.asyncio
    async def test_own_tier_is_only_the_actor(self, world):
        scope = await world.resolver.resolve(await world.actor_for(world.bob))

        assert scope.user_ids == [world.bob.id]
        assert scope.projects is None
        assert scope.is_unrestricted

    @pytest.mark.asyncio
    async def test_archived_memberships_do_not_grant_others_tier(self, world):
        scope = await world.resolver.resolve(await world.actor_for(world.dave))

        assert scope.user_ids == [world.dave.id]
        assert scope.projects is None

    @pytest.mark.asyncio
    async def test_actor_without_memberships_sees_only_themselves(self, world):
        loner = await world.users.save(User(login="loner", firstname="Lone"))

        scope = await world.resolver.resolve(await world.actor_for(loner))

        assert scope.user_ids == [loner.id]

    @pytest.mark.asyncio
    async def test_report_projects_follow_the_same_tiers(self, world):
        every = await world.resolver.report_projects(await world.actor_for(world.root))
        own = await world.resolver.report_projects(await world.actor_for(world.alice))
        unrestricted = await world.resolver.report_projects(await world.actor_for(world.bob))

        assert {p.id for p in every} == {world.website.id, world.backend.id, world.closed.id}
        assert [p.name for p in own] == ["Backend", "Website"]
        assert unrestricted is None
