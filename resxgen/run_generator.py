"""Orchestration logic for generating accessor code from .resx files."""

import logging
import os
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from resxgen.additional_file import AdditionalFile
from resxgen.cancellation_token import CancellationToken
from resxgen.diagnostic import Diagnostic
from resxgen.diagnostic_reporter import DiagnosticReporter
from resxgen.generator_output import GeneratedArtifact, GeneratorOutput
from resxgen.group_resources import group_resources
from resxgen.load_config import options_from_config
from resxgen.load_resource_files import load_resource_files
from resxgen.options_provider import OptionsProvider
from resxgen.render_debug_header import render_debug_header
from resxgen.render_resource_class import render_resource_class
from resxgen.resolve_config import resolve_config
from resxgen.resource_group import ResourceGroup

logger = logging.getLogger(__name__)


def artifact_name(group_key: str) -> str:
    """Return the generated file name for a group."""
    return f"{os.path.basename(group_key)}.resx.g.cs"


def generate_group(
    group: ResourceGroup,
    options: OptionsProvider,
    *,
    assembly_name: str | None = None,
    supports_nullable_attributes: bool = True,
    cancellation: CancellationToken | None = None,
) -> tuple[GeneratedArtifact, list[Diagnostic]]:
    """Generate the artifact of one group along with its diagnostics."""
    logger.debug("Generating %s from %d file(s)", group.key, len(group.files))
    reporter = DiagnosticReporter()

    config = resolve_config(group, options, assembly_name, reporter)
    entries = load_resource_files(group, reporter, cancellation)

    text = render_debug_header(group, config)
    if config.resource_name is not None and entries is not None:
        text += render_resource_class(
            config.namespace,
            config.class_name,
            config.resource_name,
            entries,
            supports_nullable_attributes=supports_nullable_attributes,
            use_instance_members=config.use_instance_members,
        )

    artifact = GeneratedArtifact(hint_name=artifact_name(group.key), text=text)
    return artifact, reporter.diagnostics


def run_generator(
    files: Iterable[AdditionalFile],
    options: OptionsProvider,
    *,
    assembly_name: str | None = None,
    supports_nullable_attributes: bool = True,
    cancellation: CancellationToken | None = None,
    max_workers: int = 1,
) -> GeneratorOutput:
    """Generate one artifact per resource group.

    Groups are independent; with ``max_workers > 1`` they run on a thread pool.
    Results and diagnostics always come back in group-key order.
    """
    groups = group_resources(files)
    logger.info("Generating accessors for %d resource group(s)", len(groups))

    def work(group: ResourceGroup) -> tuple[GeneratedArtifact, list[Diagnostic]]:
        return generate_group(
            group,
            options,
            assembly_name=assembly_name,
            supports_nullable_attributes=supports_nullable_attributes,
            cancellation=cancellation,
        )

    if max_workers > 1 and len(groups) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(work, groups))
    else:
        results = [work(g) for g in groups]

    output = GeneratorOutput()
    reporter = DiagnosticReporter()
    for artifact, diagnostics in results:
        output.artifacts.append(artifact)
        reporter.extend(diagnostics)
    output.diagnostics = reporter.diagnostics
    return output


def run_generator_from_config(
    files: Iterable[AdditionalFile],
    config: dict[str, Any],
    base_dir: str | None = None,
    cancellation: CancellationToken | None = None,
) -> GeneratorOutput:
    """Run the generator with settings taken from a loaded config."""
    return run_generator(
        files,
        options_from_config(config, base_dir),
        assembly_name=config.get("assembly_name"),
        supports_nullable_attributes=bool(
            config.get("supports_nullable_attributes", True)
        ),
        cancellation=cancellation,
        max_workers=int(config.get("max_workers") or 1),
    )
