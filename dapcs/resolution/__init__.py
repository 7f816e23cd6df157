"""Project and build-output resolution for .NET debugging."""

from dapcs.resolution.artifacts import ArtifactMatcher
from dapcs.resolution.artifacts import artifact_label
from dapcs.resolution.artifacts import get_net_version
from dapcs.resolution.launch_profile import LaunchProfileParser
from dapcs.resolution.locator import ProjectFileLocator
from dapcs.resolution.models import BuildArtifactSet
from dapcs.resolution.models import LaunchProfile
from dapcs.resolution.models import ProjectDescriptor
from dapcs.resolution.models import ResolvedTarget
from dapcs.resolution.models import SelectionRequest
from dapcs.resolution.models import StartupProject
from dapcs.resolution.orchestrator import ResolutionOrchestrator
from dapcs.resolution.selector import CandidateSelector

__all__ = [
    "ArtifactMatcher",
    "BuildArtifactSet",
    "CandidateSelector",
    "LaunchProfile",
    "LaunchProfileParser",
    "ProjectDescriptor",
    "ProjectFileLocator",
    "ResolutionOrchestrator",
    "ResolvedTarget",
    "SelectionRequest",
    "StartupProject",
    "artifact_label",
    "get_net_version",
]
