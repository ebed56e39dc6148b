"""
Unit tests for the SocialNetwork layer.
"""

import pytest

from social_network import SocialNetwork


def test_add_user():
    network = SocialNetwork()

    assert network.add_user("alice")
    assert network.add_user("alice") is False
    assert network.add_user("") is False
    assert network.all_users() == ["alice"]


def test_add_friends_is_symmetric_and_creates_users():
    network = SocialNetwork()

    assert network.add_friends("alice", "bob")

    assert network.friends("alice") == ["bob"]
    assert network.friends("bob") == ["alice"]
    assert network.graph.edge_weight("alice", "bob") == 1
    assert network.graph.edge_weight("bob", "alice") == 1


@pytest.mark.parametrize("first, second", [("alice", "alice"), ("", "bob"), ("alice", "")])
def test_add_friends_rejects_invalid_pairs(first, second):
    network = SocialNetwork()

    assert network.add_friends(first, second) is False
    assert network.all_users() == []


def test_add_friends_twice():
    network = SocialNetwork()
    network.add_friends("alice", "bob")

    assert network.add_friends("bob", "alice") is False
    assert network.friends("alice") == ["bob"]


def test_add_friends_completes_one_sided_link():
    network = SocialNetwork()
    network.graph.add_edge("alice", "bob", 1)

    assert network.add_friends("alice", "bob")
    assert network.friends("bob") == ["alice"]


def test_friends_of_unknown_user_is_empty():
    network = SocialNetwork()
    network.add_user("loner")

    assert network.friends("nobody") == []
    assert network.friends("loner") == []


def test_unfriend():
    network = SocialNetwork()
    network.add_friends("alice", "bob")

    assert network.unfriend("bob", "alice")
    assert network.friends("alice") == []
    assert network.friends("bob") == []
    assert network.unfriend("alice", "bob") is False
    # users survive the unfriending
    assert sorted(network.all_users()) == ["alice", "bob"]


def test_unfriend_unknown_users_creates_nothing():
    network = SocialNetwork()

    assert network.unfriend("p", "q") is False
    assert network.all_users() == []


def test_unfriend_one_sided_link_changes_nothing():
    network = SocialNetwork()
    network.graph.add_edge("alice", "bob", 1)

    assert network.unfriend("alice", "bob") is False
    assert network.graph.has_edge("alice", "bob")


def test_people_you_may_know():
    network = SocialNetwork()
    network.add_friends("me", "ann")
    network.add_friends("me", "ben")
    network.add_friends("ann", "ben")
    network.add_friends("ann", "cat")
    network.add_friends("ben", "cat")
    network.add_friends("ben", "dan")
    network.add_friends("dan", "eve")

    assert network.people_you_may_know("me") == {"cat", "dan"}
    assert network.people_you_may_know("eve") == {"ben"}


def test_people_you_may_know_edge_cases():
    network = SocialNetwork()
    network.add_user("loner")
    network.add_friends("a", "b")

    assert network.people_you_may_know("nobody") == set()
    assert network.people_you_may_know("loner") == set()
    assert network.people_you_may_know("a") == set()


@pytest.mark.parametrize(
    "call",
    [
        lambda n: n.add_user(None),
        lambda n: n.add_friends(None, "b"),
        lambda n: n.friends(None),
        lambda n: n.unfriend("a", None),
        lambda n: n.people_you_may_know(None),
        lambda n: n.read_social_network_data(None),
    ],
)
def test_none_arguments_raise(call):
    with pytest.raises(ValueError):
        call(SocialNetwork())


def test_read_social_network_data(tmp_path):
    first = tmp_path / "one.txt"
    first.write_text("adduser alice\naddfriends alice bob\n")
    second = tmp_path / "two.txt"
    second.write_text("addfriends carol bob\nnot a command\n")
    network = SocialNetwork()

    assert network.read_social_network_data([first, tmp_path / "missing.txt", second], max_workers=2)

    assert sorted(network.all_users()) == ["alice", "bob", "carol"]
    assert sorted(network.friends("bob")) == ["alice", "carol"]
    assert network.people_you_may_know("alice") == {"carol"}
    assert len(network.last_report.failed) == 1
