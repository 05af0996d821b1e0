"""Core of picdesk: section layout policy, section table and the loader."""
