from __future__ import annotations

from padview.models.drive import DriveInfo, FileInfo
from padview.models.enums import Button
from padview.screens.drive_menu import DriveMenuScreen
from padview.screens.view_screen import ViewScreen
from tests.screen_fakes import FixedLister, RecordingNavigator, make_context


def _drive(n: int, mounted: bool = True) -> DriveInfo:
    return DriveInfo(
        device=f"/dev/sd{chr(ord('a') + n)}1",
        port=f"USB{n}",
        mount_point=f"/media/pi/USB{n}" if mounted else None,
        label="vfat",
    )


def test_empty_menu_asks_for_a_drive() -> None:
    menu = DriveMenuScreen(make_context(FixedLister()))

    assert menu.view_state().lines == ("Select drive", "Insert a drive")
    assert menu.selected is None


def test_lists_drives_with_selection_marker() -> None:
    menu = DriveMenuScreen(make_context(FixedLister()))

    menu.drives_changed([_drive(0), _drive(1, mounted=False)])

    assert menu.view_state().lines == ("Select drive", ">USB0 vfat", " USB1 (not mounted)")


def test_selection_moves_and_scrolls_into_view() -> None:
    menu = DriveMenuScreen(make_context(FixedLister(), page_size=4))
    menu.drives_changed([_drive(n) for n in range(6)])

    for _ in range(4):
        menu.button_down(Button.DOWN)

    assert menu.selected == _drive(4)
    state = menu.view_state()
    assert state.line_offset == 3
    assert state.lines[5].startswith(">")

    for _ in range(10):
        menu.button_down(Button.UP)
    assert menu.selected == _drive(0)
    assert menu.view_state().line_offset == 0


def test_selection_follows_drive_across_changes() -> None:
    menu = DriveMenuScreen(make_context(FixedLister()))
    menu.drives_changed([_drive(0), _drive(1), _drive(2)])
    menu.button_down(Button.DOWN)
    menu.button_down(Button.DOWN)

    menu.drives_changed([_drive(1), _drive(2)])

    assert menu.selected == _drive(2)


def test_confirm_pushes_listing_for_selected_drive() -> None:
    navigator = RecordingNavigator()
    lister = FixedLister([FileInfo("a.txt", 3)])
    menu = DriveMenuScreen(make_context(lister, navigator=navigator))
    menu.drives_changed([_drive(0), _drive(1)])
    menu.button_down(Button.DOWN)

    menu.button_down(Button.CONFIRM)

    assert len(navigator.pushed) == 1
    pushed = navigator.pushed[0]
    assert isinstance(pushed, ViewScreen)
    assert pushed.drive == _drive(1)


def test_confirm_without_drives_does_nothing() -> None:
    navigator = RecordingNavigator()
    menu = DriveMenuScreen(make_context(FixedLister(), navigator=navigator))

    menu.button_down(Button.CONFIRM)

    assert navigator.pushed == []


def test_pan_survives_selection_changes() -> None:
    menu = DriveMenuScreen(make_context(FixedLister(), pan_step=32))
    menu.drives_changed([_drive(0), _drive(1)])

    menu.button_down(Button.RIGHT)
    menu.button_down(Button.DOWN)

    assert menu.selected == _drive(1)
    assert menu.view_state().x_offset == -32

    menu.drives_changed([_drive(0), _drive(1), _drive(2)])
    assert menu.view_state().x_offset == -32


def test_back_returns_to_language_choice() -> None:
    navigator = RecordingNavigator()
    menu = DriveMenuScreen(make_context(FixedLister(), navigator=navigator))

    menu.button_down(Button.BACK)

    assert navigator.popped == [menu]
