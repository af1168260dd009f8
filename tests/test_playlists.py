import uuid

from fpimport.playlists import (
    AddApp,
    Playlist,
    PlaylistGame,
    cull_unimported_games,
    filter_target_playlists,
    group_add_apps,
    playlist_specific_game_ids,
    strip_line_breaks,
    unselected_platforms,
)

ANIM = "theatre"


def _ids(count):
    return [uuid.uuid4() for _ in range(count)]


def test_strip_line_breaks_removes_all_kinds():
    assert strip_line_breaks("a\r\nb\nc\rd") == "abcd"


def test_strip_line_breaks_leaves_plain_text():
    text = "Plain title with spaces"
    assert strip_line_breaks(text) == text


def test_filter_keeps_only_selected_titles_in_order():
    playlists = [Playlist("One"), Playlist("Two"), Playlist("Three")]
    result = filter_target_playlists(playlists, ["Three", "One"], True, ANIM)
    assert [p.title for p in result] == ["One", "Three"]


def test_filter_drops_animation_playlists_when_excluded():
    playlists = [Playlist("Games", "arcade"), Playlist("Cartoons", ANIM)]
    result = filter_target_playlists(playlists, ["Games", "Cartoons"], False, ANIM)
    assert [p.title for p in result] == ["Games"]


def test_filter_keeps_animation_playlists_when_included():
    playlists = [Playlist("Games", "arcade"), Playlist("Cartoons", ANIM)]
    result = filter_target_playlists(playlists, ["Games", "Cartoons"], True, ANIM)
    assert [p.title for p in result] == ["Games", "Cartoons"]


def test_filter_with_no_selection_is_empty():
    assert filter_target_playlists([Playlist("One")], [], True, ANIM) == []


def test_playlist_specific_game_ids_flattens_in_order():
    a, b, c = _ids(3)
    playlists = [
        Playlist("One", playlist_games=[PlaylistGame(a), PlaylistGame(b)]),
        Playlist("Two", playlist_games=[PlaylistGame(c), PlaylistGame(a)]),
    ]
    assert playlist_specific_game_ids(playlists) == [a, b, c, a]


def test_cull_removes_unimported_games():
    a, b, c = _ids(3)
    playlists = [
        Playlist("One", playlist_games=[PlaylistGame(a), PlaylistGame(b)]),
        Playlist("Two", playlist_games=[PlaylistGame(c)]),
    ]
    cull_unimported_games(playlists, {a, c})
    assert playlist_specific_game_ids(playlists) == [a, c]


def test_cull_with_nothing_imported_empties_playlists():
    a, b = _ids(2)
    playlists = [Playlist("One", playlist_games=[PlaylistGame(a), PlaylistGame(b)])]
    cull_unimported_games(playlists, [])
    assert playlists[0].playlist_games == []


def test_unselected_platforms_preserves_order():
    available = ["Flash", "HTML5", "Shockwave", "Java"]
    assert unselected_platforms(available, ["HTML5", "Java"]) == ["Flash", "Shockwave"]


def test_unselected_platforms_ignores_unknown_selection():
    available = ["Flash", "HTML5"]
    assert unselected_platforms(available, ["Unity"]) == available


def test_group_add_apps_by_parent():
    game_a, game_b = _ids(2)
    apps = [
        AddApp(uuid.uuid4(), game_a, "first"),
        AddApp(uuid.uuid4(), game_b, "other"),
        AddApp(uuid.uuid4(), game_a, "second"),
    ]
    groups = group_add_apps(apps)
    assert set(groups) == {game_a, game_b}
    assert [app.name for app in groups[game_a]] == ["first", "second"]
    assert groups[game_b] == [apps[1]]


def test_group_add_apps_keeps_every_app():
    parents = _ids(3)
    apps = [AddApp(uuid.uuid4(), parents[i % 3]) for i in range(7)]
    groups = group_add_apps(apps)
    assert sum(len(v) for v in groups.values()) == len(apps)
    assert all(app.parent_id == parent for parent, v in groups.items() for app in v)


def test_group_add_apps_empty():
    assert group_add_apps([]) == {}