"""Switcher configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SwitcherSettings(BaseSettings):
    """Trigger strings and session preferences for the switcher.

    An empty trigger string disables triggering for that command.
    """

    editor_list_command: str = Field(
        default="edt ",
        description="Prefix trigger for the open editors list",
    )
    symbol_list_command: str = Field(
        default="@",
        description="Sourced trigger for symbols of the selected suggestion or editor",
    )
    symbol_list_active_editor_command: str = Field(
        default="$ ",
        description="Prefix trigger for symbols of the active editor",
    )
    workspace_list_command: str = Field(
        default="+",
        description="Prefix trigger for the workspaces list",
    )
    headings_list_command: str = Field(
        default="#",
        description="Prefix trigger for the headings list",
    )
    bookmarks_list_command: str = Field(
        default="'",
        description="Prefix trigger for the bookmarks list",
    )
    command_list_command: str = Field(
        default=">",
        description="Prefix trigger for the command palette",
    )
    related_items_list_command: str = Field(
        default="~",
        description="Sourced trigger for items related to the selected suggestion or editor",
    )
    related_items_list_active_editor_command: str = Field(
        default="^ ",
        description="Prefix trigger for items related to the active editor",
    )
    vault_list_command: str = Field(
        default="vault ",
        description="Prefix trigger for the vaults list",
    )
    escape_cmd_char: str = Field(
        default="!",
        min_length=1,
        description="Marker that forces the trigger right after it to be literal text",
    )

    preserve_command_palette_last_input: bool = Field(
        default=False,
        description="Reopen the command palette with its previous input",
    )
    preserve_quick_switcher_last_input: bool = Field(
        default=False,
        description="Reopen the other modes with their previous input",
    )

    model_config = SettingsConfigDict(
        env_prefix="QUICKSWITCH_",
        extra="ignore",
    )
