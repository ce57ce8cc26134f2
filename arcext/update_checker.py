"""Checks a release feed for a newer build and installs it in the background."""

from __future__ import annotations

import json
import os
import threading
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, BinaryIO, Callable

import requests

Version = tuple[int, int, int, int]

_ZERO_VERSION: Version = (0, 0, 0, 0)
_MAX_TOKEN = 0xFFFF
_DIGITS = "0123456789"
_HTTP_TIMEOUT = 30


class Status(Enum):
    """Progress of an update.

    UNKNOWN -> UPDATE_AVAILABLE -> DISMISSED, or
    UPDATE_AVAILABLE -> UPDATE_IN_PROGRESS -> UPDATE_SUCCESSFUL / UPDATE_ERROR.
    """

    UNKNOWN = 0
    UPDATE_AVAILABLE = 1
    DISMISSED = 2
    UPDATE_IN_PROGRESS = 3
    UPDATE_SUCCESSFUL = 4
    UPDATE_ERROR = 5


@dataclass(eq=False)
class UpdateState:
    """Shared state of one update check and the install that may follow.

    ``lock`` guards every field except ``current_version`` and
    ``install_path``.  ``new_version`` and ``download_url`` are only
    meaningful once ``update_status`` has left ``UNKNOWN``.
    """

    current_version: Version | None
    install_path: str
    update_status: Status = Status.UNKNOWN
    new_version: Version = _ZERO_VERSION
    download_url: str = ""
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    tasks: list[threading.Thread] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.install_path = os.fspath(self.install_path)
        if self.current_version is not None:
            self.current_version = tuple(self.current_version)

    def finish_pending_tasks(self) -> None:
        """Wait for every background task started so far."""
        with self.lock:
            tasks, self.tasks = self.tasks, []
        for task in tasks:
            task.join()

    def change_status(self, expected_status: Status, new_status: Status) -> bool:
        """Set ``new_status`` only if the status is ``expected_status``."""
        with self.lock:
            if self.update_status != expected_status:
                return False
            self.update_status = new_status
            return True


class UpdateChecker:
    """Finds the newest release of a repository and installs its library file.

    Subclasses may override the HTTP methods, ``log``, ``parse_version``,
    ``is_newer`` and ``version_as_string`` to change behaviour.
    """

    api_base = "https://api.github.com"

    def clear_files(self, install_path: str | os.PathLike[str]) -> None:
        """Remove leftovers of an earlier update next to ``install_path``."""
        base = os.fspath(install_path)
        for leftover in (Path(base + ".tmp"), Path(base + ".old")):
            try:
                if leftover.is_dir() and not leftover.is_symlink():
                    leftover.rmdir()
                else:
                    leftover.unlink(missing_ok=True)
            except OSError as exc:
                self.log(f"Failed to remove {leftover} - {exc}")

    def check_for_update(
        self,
        install_path: str | os.PathLike[str],
        current_version: Version,
        repo: str,
        allow_prerelease: bool,
    ) -> UpdateState:
        """Start looking for a release newer than ``current_version``."""
        return self.get_update_internal(
            install_path, tuple(current_version), repo, allow_prerelease
        )

    def get_install_state(
        self, install_path: str | os.PathLike[str], repo: str, allow_prerelease: bool
    ) -> UpdateState:
        """Start looking for any release, to install it at ``install_path``."""
        return self.get_update_internal(install_path, None, repo, allow_prerelease)

    def perform_install_or_update(self, state: UpdateState) -> None:
        """Download and put in place the found release.

        The caller must hold ``state.lock``.
        """
        if not state.lock.locked():
            raise RuntimeError("the state lock must be held")

        if state.update_status != Status.UPDATE_AVAILABLE:
            self.log(
                f"Tried to download update when update status was {state.update_status.value}"
            )
            return
        state.update_status = Status.UPDATE_IN_PROGRESS

        if state.current_version is not None:
            self._start_task(state, lambda: self._update_task(state))
        else:
            self._start_task(state, lambda: self._install_task(state))

    def get_update_internal(
        self,
        install_path: str | os.PathLike[str],
        current_version: Version | None,
        repo: str,
        allow_prerelease: bool,
    ) -> UpdateState:
        """Create the state and look for a release in the background."""
        state = UpdateState(current_version, os.fspath(install_path))
        with state.lock:
            self._start_task(
                state, lambda: self._check_task(state, repo, allow_prerelease)
            )
        return state

    def version_as_string(self, version: Version) -> str:
        """All four parts of ``version`` joined by dots."""
        return f"{version[0]}.{version[1]}.{version[2]}.{version[3]}"

    def is_newer(self, repo_version: Version, current_version: Version) -> bool:
        """Whether ``repo_version`` is newer; the fourth part is ignored."""
        return tuple(current_version[:3]) < tuple(repo_version[:3])

    def log(self, message: str) -> None:
        """Receive diagnostic text; ignored by default."""

    def parse_version(self, version_string: str) -> Version:
        """Read the first three numbers of dot-separated tokens.

        Leading non-digits of a token are skipped and tokens without a
        number are ignored.  If fewer than three numbers are found the
        result is all zeros.
        """
        parts = [0, 0, 0, 0]
        found = 0
        start = 0
        while True:
            dot = version_string.find(".", start)
            if dot == -1:
                dot = len(version_string)
            token = version_string[start:dot].lstrip()
            token = _skip_non_digits(version_string[start:dot])
            number = _leading_number(token)
            if number is None:
                self.log(f"Parsing version token '{token}' from '{version_string}' failed")
            else:
                parts[found] = number
                found += 1
            start = dot + 1
            if not (start < len(version_string) and found < 3):
                break

        if found < 3:
            self.log(
                f"Failed to parse version from {version_string} - only found {found} tokens"
            )
            return _ZERO_VERSION
        return tuple(parts)

    def perform_download(
        self, url: str, destination_path: str | os.PathLike[str]
    ) -> bool:
        """Download ``url`` into ``destination_path``; False on failure."""
        try:
            with open(destination_path, "wb") as stream:
                if not self.http_download(url, stream):
                    return False
        except OSError as exc:
            self.log(f"Downloading {url} failed - output stream failure: {exc}")
            return False
        return True

    def get_latest_release(
        self, repo: str, allow_prerelease: bool
    ) -> tuple[Version, str] | None:
        """Version and library download link of the newest release.

        Returns None when the feed cannot be fetched or the release has no
        library asset; raises on malformed data.
        """
        if allow_prerelease:
            link = f"{self.api_base}/repos/{repo}/releases"
        else:
            link = f"{self.api_base}/repos/{repo}/releases/latest"

        response = self.http_get(link)
        if response is None:
            self.log(f"Getting {link} failed")
            return None

        data = json.loads(response)
        if allow_prerelease:
            if not isinstance(data, list) or not data:
                raise ValueError("release list is empty or not a list")
            release = data[0]
        else:
            release = data
        if not isinstance(release, dict):
            raise ValueError("release is not an object")

        tag_name = release["tag_name"]
        if not isinstance(tag_name, str):
            raise TypeError("tag_name is not a string")
        release_version = self.parse_version(tag_name)

        download_url = ""
        for asset in release.get("assets") or []:
            asset_name = asset["name"]
            if not isinstance(asset_name, str):
                raise TypeError("asset name is not a string")
            if asset_name.endswith(".dll"):
                download_url = asset["browser_download_url"]
                self.log(f"Found download url in {asset_name} - {download_url}")
                break

        if not download_url:
            self.log(f"Failed to find download url for release {tag_name}")
            return None
        return release_version, download_url

    def http_download(self, url: str, stream: BinaryIO) -> bool:
        """Write the body of ``url`` to ``stream``; False on HTTP failure."""
        try:
            with requests.get(url, stream=True, timeout=_HTTP_TIMEOUT) as response:
                if response.status_code != 200:
                    self.log(
                        f"Downloading {url} failed - http failure "
                        f"{response.status_code} {response.reason}"
                    )
                    return False
                for chunk in response.iter_content(chunk_size=65536):
                    stream.write(chunk)
        except requests.RequestException as exc:
            self.log(f"Downloading {url} failed - {exc}")
            return False
        return True

    def http_get(self, url: str) -> str | None:
        """Body of ``url`` as text, or None on HTTP failure."""
        try:
            response = requests.get(url, timeout=_HTTP_TIMEOUT)
        except requests.RequestException as exc:
            self.log(f"Getting {url} failed - {exc}")
            return None
        if response.status_code != 200:
            self.log(f"Getting {url} failed - {response.status_code} {response.reason}")
            return None
        return response.text

    # Background work ---------------------------------------------------------

    @staticmethod
    def _start_task(state: UpdateState, work: Callable[[], Any]) -> None:
        thread = threading.Thread(target=work, name="update-checker", daemon=True)
        state.tasks.append(thread)
        thread.start()

    def _check_task(self, state: UpdateState, repo: str, allow_prerelease: bool) -> None:
        try:
            latest = self.get_latest_release(repo, allow_prerelease)
        except Exception as exc:
            self.log(f"GetUpdateInternal: GetLatestRelease threw {exc}")
            return

        if latest is None:
            self.log("GetUpdate: GetUpdateInternal didn't find any release")
            return

        release_version, download_url = latest
        if state.current_version is not None and not self.is_newer(
            release_version, state.current_version
        ):
            self.log(
                f"GetUpdateInternal: Found new release "
                f"{self.version_as_string(release_version)} which is not newer than "
                f"current installed version {self.version_as_string(state.current_version)}"
            )
            return

        with state.lock:
            state.update_status = Status.UPDATE_AVAILABLE
            state.new_version = release_version
            state.download_url = download_url
        self.log(
            f"GetUpdateInternal: Found new release "
            f"{self.version_as_string(release_version)} with link {download_url}"
        )

    def _update_task(self, state: UpdateState) -> None:
        temp_path = state.install_path + ".tmp"
        old_path = state.install_path + ".old"

        if not self.perform_download(state.download_url, temp_path):
            state.change_status(Status.UPDATE_IN_PROGRESS, Status.UPDATE_ERROR)
            return

        for source, target in ((state.install_path, old_path), (temp_path, state.install_path)):
            try:
                os.rename(source, target)
            except OSError as exc:
                self.log(f"Failed to rename {source} to {target} - {exc}")
                state.change_status(Status.UPDATE_IN_PROGRESS, Status.UPDATE_ERROR)
                return

        self.log("Successfully performed update")
        state.change_status(Status.UPDATE_IN_PROGRESS, Status.UPDATE_SUCCESSFUL)

    def _install_task(self, state: UpdateState) -> None:
        if not self.perform_download(state.download_url, state.install_path):
            state.change_status(Status.UPDATE_IN_PROGRESS, Status.UPDATE_ERROR)
            return
        self.log("Successfully performed install")
        state.change_status(Status.UPDATE_IN_PROGRESS, Status.UPDATE_SUCCESSFUL)


def _skip_non_digits(token: str) -> str:
    index = 0
    while index < len(token) and token[index] not in _DIGITS:
        index += 1
    return token[index:]


def _leading_number(token: str) -> int | None:
    end = 0
    while end < len(token) and token[end] in _DIGITS:
        end += 1
    if end == 0:
        return None
    value = int(token[:end])
    if value > _MAX_TOKEN:
        return None
    return value