from __future__ import annotations

from types import SimpleNamespace

import psutil
import pytest

from padview.models.drive import DriveInfo
from padview.services import drive_monitor
from padview.services.drive_monitor import DriveMonitor, StaticDriveFeed, scan_drives

ROOTS = ["/media", "/mnt"]


def _part(device: str, mountpoint: str, fstype: str = "vfat") -> SimpleNamespace:
    return SimpleNamespace(device=device, mountpoint=mountpoint, fstype=fstype, opts="rw")


@pytest.fixture
def partitions(monkeypatch: pytest.MonkeyPatch) -> list[SimpleNamespace]:
    parts: list[SimpleNamespace] = []
    monkeypatch.setattr(drive_monitor.psutil, "disk_partitions", lambda all=False: list(parts))
    return parts


def test_scan_keeps_only_partitions_under_mount_roots(partitions: list[SimpleNamespace]) -> None:
    partitions.extend(
        [
            _part("/dev/mmcblk0p2", "/", "ext4"),
            _part("/dev/sdb1", "/media/pi/SDCARD1"),
            _part("/dev/sda1", "/mnt/usb", "exfat"),
            _part("/dev/sdc1", "/media", "vfat"),
        ]
    )

    drives = scan_drives(ROOTS)

    assert drives == [
        DriveInfo(device="/dev/sda1", port="usb", mount_point="/mnt/usb", label="exfat"),
        DriveInfo(device="/dev/sdb1", port="SDCARD1", mount_point="/media/pi/SDCARD1", label="vfat"),
    ]


def test_poll_reports_only_changes(partitions: list[SimpleNamespace]) -> None:
    reports: list[list[DriveInfo]] = []
    monitor = DriveMonitor(ROOTS)

    assert monitor.poll_once(reports.append) is True
    assert monitor.poll_once(reports.append) is False
    partitions.append(_part("/dev/sdb1", "/media/pi/SDCARD1"))
    assert monitor.poll_once(reports.append) is True
    partitions.clear()
    assert monitor.poll_once(reports.append) is True

    assert [len(r) for r in reports] == [0, 1, 0]


def test_poll_survives_scan_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(all: bool = False) -> list[SimpleNamespace]:
        raise psutil.AccessDenied()

    monkeypatch.setattr(drive_monitor.psutil, "disk_partitions", broken)
    reports: list[list[DriveInfo]] = []

    assert DriveMonitor(ROOTS).poll_once(reports.append) is False
    assert reports == []


def test_monitor_thread_delivers_initial_list(partitions: list[SimpleNamespace]) -> None:
    import threading

    partitions.append(_part("/dev/sdb1", "/media/pi/SDCARD1"))
    delivered = threading.Event()
    reports: list[list[DriveInfo]] = []

    def listener(drives: list[DriveInfo]) -> None:
        reports.append(drives)
        delivered.set()

    monitor = DriveMonitor(ROOTS, poll_interval=0.05)
    monitor.start(listener)
    try:
        assert delivered.wait(5)
    finally:
        monitor.stop()

    assert reports[0][0].port == "SDCARD1"


def test_static_feed_reports_once() -> None:
    drive = DriveInfo(device="dir:/tmp/x", port="x", mount_point="/tmp/x")
    reports: list[list[DriveInfo]] = []

    StaticDriveFeed([drive]).start(reports.append)

    assert reports == [[drive]]
