"""Lifecycle diagram model: which methods appear in which stage and phase."""

from __future__ import annotations

from dataclasses import dataclass

from lifecycleview.core.versions import (
    SUPPORTED_REACT_VERSIONS,
    is_supported_version,
    latest_react_version,
)

STAGES: tuple[str, ...] = ("mounting", "updating", "unmounting")
PHASES: tuple[str, ...] = ("render", "pre_commit", "commit")

STAGE_TITLES = {
    "mounting": "Mounting",
    "updating": "Updating",
    "unmounting": "Unmounting",
}

PHASE_TITLES = {
    "render": "Render phase",
    "pre_commit": "Pre-commit phase",
    "commit": "Commit phase",
}

PHASE_DESCRIPTIONS = {
    "render": "Pure and has no side effects. May be paused, aborted or restarted by React.",
    "pre_commit": "Can read the DOM.",
    "commit": "Can work with DOM, run side effects, schedule updates.",
}

UPDATE_TRIGGERS: tuple[str, ...] = ("New props", "setState()", "forceUpdate()")

DOM_UPDATE = "React updates DOM and refs"


@dataclass(frozen=True, slots=True)
class LifecycleMethod:
    name: str
    stage: str
    phase: str
    advanced_only: bool = False


@dataclass(frozen=True, slots=True)
class DiagramModel:
    """What the diagram view draws for one advanced/version combination."""

    react_version: str
    requested_version: str
    advanced: bool
    phases: tuple[str, ...]
    methods: tuple[LifecycleMethod, ...]
    # Update triggers that also run getDerivedStateFromProps.
    derived_state_triggers: tuple[str, ...]

    @property
    def version_supported(self) -> bool:
        return self.react_version == self.requested_version

    def methods_for(self, stage: str, phase: str) -> list[LifecycleMethod]:
        return [m for m in self.methods if m.stage == stage and m.phase == phase]


_METHODS: tuple[LifecycleMethod, ...] = (
    LifecycleMethod("constructor", "mounting", "render"),
    LifecycleMethod("getDerivedStateFromProps", "mounting", "render", advanced_only=True),
    LifecycleMethod("render", "mounting", "render"),
    LifecycleMethod(DOM_UPDATE, "mounting", "commit"),
    LifecycleMethod("componentDidMount", "mounting", "commit"),
    LifecycleMethod("getDerivedStateFromProps", "updating", "render", advanced_only=True),
    LifecycleMethod("shouldComponentUpdate", "updating", "render", advanced_only=True),
    LifecycleMethod("render", "updating", "render"),
    LifecycleMethod("getSnapshotBeforeUpdate", "updating", "pre_commit", advanced_only=True),
    LifecycleMethod(DOM_UPDATE, "updating", "commit"),
    LifecycleMethod("componentDidUpdate", "updating", "commit"),
    LifecycleMethod(DOM_UPDATE, "unmounting", "commit"),
    LifecycleMethod("componentWillUnmount", "unmounting", "commit"),
)


def build_diagram(
    advanced: bool,
    react_version: str,
    versions: tuple[str, ...] = SUPPORTED_REACT_VERSIONS,
) -> DiagramModel:
    """Build the diagram for a detail level and version.

    Unknown versions render as the latest supported one; the requested value
    is kept on the model.
    """
    version = react_version if is_supported_version(react_version, versions) else latest_react_version(versions)
    if advanced:
        phases = PHASES
        methods = _METHODS
    else:
        phases = ("render", "commit")
        methods = tuple(m for m in _METHODS if not m.advanced_only)

    # 16.3 only re-derived state on new props; later versions on every update.
    if version == "16.3":
        derived_triggers: tuple[str, ...] = ("New props",)
    else:
        derived_triggers = UPDATE_TRIGGERS

    return DiagramModel(
        react_version=version,
        requested_version=react_version,
        advanced=advanced,
        phases=phases,
        methods=methods,
        derived_state_triggers=derived_triggers if advanced else (),
    )
