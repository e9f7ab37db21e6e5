"""
Install command handler for the localrepo CLI.
"""

import argparse
import logging

from localrepo.config import GlobalConfig
from localrepo.errors import require_directory, require_file
from localrepo.modules.utils import print_success
from localrepo.repo.coordinates import split_artifact_id
from localrepo.repo.descriptor import write_default_pom
from localrepo.repo.installer import install_artifact

logger = logging.getLogger(__name__)

DOC_INSTALL = """Install artifact to local repository
  Arguments:
    [options] <filename> <artifact-id> <version>
  Options:
    -r | --repo repo-path
    -p | --pom  POM-file (minimal POM is generated if no POM file specified)
  Example:
    foo-1.0.jar bar/foo 1.0"""


def add_install_parser(subparsers) -> argparse.ArgumentParser:
    """Add install command parser."""
    install_parser = subparsers.add_parser(
        'install',
        help='Install artifact to local repository',
        description=DOC_INSTALL,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    install_parser.add_argument(
        '-r', '--repo',
        help='Local repo path (default: from config, ~/.m2/repository)'
    )
    install_parser.add_argument(
        '-p', '--pom',
        help='Artifact POM file'
    )
    install_parser.add_argument('filename', help='Artifact file to install')
    install_parser.add_argument('artifact_id', metavar='artifact-id',
                                help='artifactId or groupId/artifactId')
    install_parser.add_argument('version', help='Artifact version')
    return install_parser


def handle_install_command(args: argparse.Namespace, config: GlobalConfig) -> int:
    """Handle install command."""
    repo_root = require_directory(args.repo or config.repository_path)
    content_file = require_file(args.filename)
    group_id, artifact_id = split_artifact_id(args.artifact_id)

    generated_pom = None
    if args.pom:
        pom_file = require_file(args.pom)
    else:
        pom_file = generated_pom = write_default_pom(group_id, artifact_id, args.version)

    try:
        installed = install_artifact(repo_root, content_file, pom_file,
                                     args.artifact_id, args.version)
    finally:
        if generated_pom is not None:
            generated_pom.unlink(missing_ok=True)
            logger.debug("Removed generated POM %s", generated_pom)

    print_success(f"Installed {installed}")
    return 0
