"""componentcraft - scaffold React components with tests and Storybook stories."""

__version__ = "0.1.0"
