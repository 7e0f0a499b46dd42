"""AsciiDoc generation for configuration settings."""

from typing import Protocol

from .filters import SettingFilter
from .settings import SettingDescriptor


class MissingElementError(LookupError):
    """A setting or value required to render the document is missing."""

    pass


class DocumentRenderer(Protocol):
    """Anything that can render filtered settings as a document."""

    def render(self, filter: SettingFilter, id: str, title: str, id_prefix: str) -> str:
        ...


def escape_cell(text: str) -> str:
    """Escape table cell separators."""
    return text.replace("|", "\\|")


class AsciiDocGenerator:
    """Render a settings catalog as an AsciiDoc reference.

    The document starts with a summary table anchored at ``id`` and titled
    ``title``, followed by one details table per setting anchored at
    ``id_prefix`` + setting name.
    """

    def __init__(self, settings: list[SettingDescriptor]):
        self.settings = sorted(settings, key=lambda s: s.name)
        self._by_name = {s.name: s for s in self.settings}

    def render(self, filter: SettingFilter, id: str, title: str, id_prefix: str) -> str:
        """Render all settings accepted by ``filter``.

        Raises:
            MissingElementError: If a selected setting has no description or
                is replaced by a setting that is not in the catalog.
        """
        selected = [s for s in self.settings if filter(s)]

        lines = self._summary(selected, id, title, id_prefix)
        for setting in selected:
            lines.append("")
            lines.extend(self._details(setting, id_prefix))
        return "\n".join(lines) + "\n"

    def _description(self, setting: SettingDescriptor) -> str:
        if not setting.description:
            raise MissingElementError(f"No description for setting '{setting.name}'")
        return escape_cell(setting.description)

    def _summary(
        self,
        settings: list[SettingDescriptor],
        id: str,
        title: str,
        id_prefix: str,
    ) -> list[str]:
        lines = [
            f"[[{id}]]",
            f".{title}",
            '[options="header", cols="<1,<2"]',
            "|===",
            "|Name |Description",
        ]
        for setting in settings:
            lines.append(
                f"|<<{id_prefix}{setting.name},{setting.name}>> |{self._description(setting)}"
            )
        lines.append("|===")
        return lines

    def _details(self, setting: SettingDescriptor, id_prefix: str) -> list[str]:
        lines = [
            f"[[{id_prefix}{setting.name}]]",
            f".{setting.name}",
            '[cols="<1h,<4"]',
            "|===",
            f"|Description a|{self._description(setting)}",
        ]
        if setting.valid_values:
            lines.append(f"|Valid values a|{escape_cell(setting.valid_values)}")
        if setting.default_value is not None:
            lines.append(f"|Default value m|+++{setting.default_value}+++")
        if setting.dynamic:
            lines.append("|Dynamic a|true")
        if setting.deprecated:
            lines.append(
                f"|Deprecated a|The `{setting.name}` configuration setting has been deprecated."
            )
            if setting.replaced_by:
                if setting.replaced_by not in self._by_name:
                    raise MissingElementError(
                        f"Setting '{setting.name}' is replaced by unknown setting "
                        f"'{setting.replaced_by}'"
                    )
                lines.append(
                    f"|Replaced by a|<<{id_prefix}{setting.replaced_by},{setting.replaced_by}>>"
                )
        lines.append("|===")
        return lines
