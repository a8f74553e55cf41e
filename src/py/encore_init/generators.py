"""Generators for the Encore project files.

Each generator derives its output from the answered ``ResolvedAppConfig`` and
hands it to a ``FileWriter``. Failures propagate to the caller unchanged.
"""

import logging
from typing import TYPE_CHECKING, Any, assert_never

import msgspec

from encore_init.config import (
    ENCORE_SCRIPTS,
    GITIGNORE_FILE,
    OUTPUT_PATH,
    PACKAGE_JSON_FILE,
    POSTCSS_CONFIG_FILE,
    PUBLIC_PATH,
    WEBPACK_CONFIG_FILE,
    CssType,
    JsType,
    PackageSet,
)
from encore_init.exceptions import ManifestDecodeError, ManifestNotFoundError

if TYPE_CHECKING:
    from encore_init.config import ResolvedAppConfig
    from encore_init.writer import FileWriter

__all__ = (
    "POSTCSS_CONFIG",
    "add_packages",
    "build_webpack_config",
    "create_postcss_config",
    "create_webpack_config",
    "install_commands",
    "required_packages",
    "update_gitignore",
    "update_package_json",
)

logger = logging.getLogger("encore_init")

POSTCSS_CONFIG = """// postcss.config.js
module.exports = {
  plugins: {
    'autoprefixer': {},
  }
};
"""

_WEBPACK_HEADER = """// webpack.config.js
const Encore = require('@symfony/webpack-encore');

Encore
  // directory where all compiled assets will be stored
  .setOutputPath('{output_path}')

  // what's the public path to this directory (relative to your project's document root dir)
  .setPublicPath('{public_path}')

  // empty the outputPath dir before each build
  .cleanupOutputBeforeBuild()

  // enable support for PostCSS (https://github.com/postcss/postcss)
  .enablePostCssLoader()
"""

_WEBPACK_FOOTER = """;

// export the final configuration
module.exports = Encore.getWebpackConfig();
"""

_ALWAYS_DEV_DEPENDENCIES = frozenset({"@symfony/webpack-encore", "postcss-loader", "autoprefixer"})
_GITIGNORE_ENTRIES = {"node_modules", "node_modules/", "/node_modules", "/node_modules/"}


def _js_block(js_type: JsType) -> str:
    match js_type:
        case JsType.REACT:
            return """
  // enable React preset in order to support JSX
  .enableReactPreset()
"""
        case JsType.VUE:
            return """
  // enable Vue.js loader
  .enableVueLoader()
"""
        case JsType.VANILLA:
            return ""
        case _:
            assert_never(js_type)


def _css_block(css_type: CssType) -> str:
    match css_type:
        case CssType.SASS:
            return """
  // enable support for Sass stylesheets
  .enableSassLoader()
"""
        case CssType.LESS:
            return """
  // enable support for Less stylesheets
  .enableLessLoader()
"""
        case CssType.CSS:
            return ""
        case _:
            assert_never(css_type)


def build_webpack_config(app_config: "ResolvedAppConfig") -> str:
    """Render the contents of ``webpack.config.js``.

    Args:
        app_config: The answered configuration.

    Returns:
        The JavaScript source of the Encore configuration.
    """
    # TODO: ask for the output and public paths once the CLI grows options for them
    return (
        _WEBPACK_HEADER.format(output_path=OUTPUT_PATH, public_path=PUBLIC_PATH)
        + _js_block(app_config.js_type)
        + _css_block(app_config.css_type)
        + _WEBPACK_FOOTER
    )


def create_webpack_config(app_config: "ResolvedAppConfig", writer: "FileWriter") -> bool:
    """Write ``webpack.config.js``, asking before replacing an existing one.

    Returns:
        True if the file was written.
    """
    return writer.write_safe(WEBPACK_CONFIG_FILE, build_webpack_config(app_config))


def create_postcss_config(writer: "FileWriter") -> bool:
    """Write ``postcss.config.js``, asking before replacing an existing one.

    Returns:
        True if the file was written.
    """
    return writer.write_safe(POSTCSS_CONFIG_FILE, POSTCSS_CONFIG)


def update_package_json(writer: "FileWriter") -> dict[str, Any]:
    """Add the ``encore:*`` scripts to the project's ``package.json``.

    Existing keys keep their position; the three script entries are added to
    (or replaced in) the ``scripts`` object.

    Args:
        writer: File access rooted at the project directory.

    Raises:
        ManifestNotFoundError: If ``package.json`` does not exist.
        ManifestDecodeError: If ``package.json`` is not a JSON object.

    Returns:
        The updated manifest.
    """
    manifest_path = str(writer.resolve(PACKAGE_JSON_FILE))
    try:
        raw = writer.read(PACKAGE_JSON_FILE)
    except FileNotFoundError as e:
        raise ManifestNotFoundError(manifest_path) from e

    try:
        manifest = msgspec.json.decode(raw)
    except msgspec.DecodeError as e:
        raise ManifestDecodeError(manifest_path, str(e)) from e
    if not isinstance(manifest, dict):
        raise ManifestDecodeError(manifest_path, "top-level value must be an object")

    if manifest.get("scripts") is None:
        manifest["scripts"] = {}
    scripts = manifest["scripts"]
    if not isinstance(scripts, dict):
        raise ManifestDecodeError(manifest_path, "'scripts' must be an object")
    scripts.update(ENCORE_SCRIPTS)

    content = msgspec.json.format(msgspec.json.encode(manifest), indent=2)
    writer.write(PACKAGE_JSON_FILE, content)
    logger.debug("Added %s to %s", ", ".join(ENCORE_SCRIPTS), manifest_path)
    return manifest


def required_packages(app_config: "ResolvedAppConfig") -> PackageSet:
    """Compute the npm packages needed for the chosen flavors.

    Args:
        app_config: The answered configuration.

    Returns:
        Runtime and development dependencies.
    """
    dependencies: set[str] = set()
    dev_dependencies = set(_ALWAYS_DEV_DEPENDENCIES)

    match app_config.js_type:
        case JsType.REACT:
            dependencies.update({"react", "react-dom"})
            dev_dependencies.add("@babel/preset-react")
        case JsType.VUE:
            dependencies.add("vue")
            dev_dependencies.update({"vue-loader", "vue-template-compiler"})
        case JsType.VANILLA:
            pass
        case _:
            assert_never(app_config.js_type)

    match app_config.css_type:
        case CssType.SASS:
            dev_dependencies.update({"sass-loader", "node-sass"})
        case CssType.LESS:
            dev_dependencies.update({"less-loader", "less"})
        case CssType.CSS:
            pass
        case _:
            assert_never(app_config.css_type)

    return PackageSet(frozenset(dependencies), frozenset(dev_dependencies))


def install_commands(packages: PackageSet, executor: str = "yarn") -> list[list[str]]:
    """Build the package manager commands that install ``packages``.

    Returns:
        One ``add`` command for runtime and one for development dependencies,
        skipping empty groups.
    """
    commands: list[list[str]] = []
    if packages.dependencies:
        commands.append([executor, "add", *sorted(packages.dependencies)])
    if packages.dev_dependencies:
        commands.append([executor, "add", "--dev", *sorted(packages.dev_dependencies)])
    return commands


def add_packages(app_config: "ResolvedAppConfig") -> PackageSet:
    """Determine the packages the generated configuration depends on.

    Installation is left to the user; the commands are printed with the next steps.

    Returns:
        The packages to install.
    """
    packages = required_packages(app_config)
    logger.debug(
        "Required packages: dependencies=%s dev_dependencies=%s",
        sorted(packages.dependencies),
        sorted(packages.dev_dependencies),
    )
    return packages


def update_gitignore(writer: "FileWriter") -> bool:
    """Ignore ``node_modules`` in an existing ``.gitignore``.

    Raises:
        FileReadError: If ``.gitignore`` is not valid UTF-8.

    Returns:
        True if the entry was appended.
    """
    if not writer.exists(GITIGNORE_FILE):
        return False
    content = writer.read_text(GITIGNORE_FILE)
    if any(line.strip() in _GITIGNORE_ENTRIES for line in content.splitlines()):
        return False
    if content and not content.endswith("\n"):
        content += "\n"
    writer.write(GITIGNORE_FILE, f"{content}node_modules/\n")
    logger.debug("Added node_modules/ to %s", writer.resolve(GITIGNORE_FILE))
    return True
