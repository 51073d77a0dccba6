"""create-regolith-addon -- scaffolds Minecraft Bedrock add-ons for Regolith."""

__version__ = "0.1.0"
