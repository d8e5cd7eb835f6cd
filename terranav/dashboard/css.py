"""All CSS strings for the terranav dashboard."""

APP_CSS = """
Screen {
    background: #000000;
    overflow: hidden;
    scrollbar-size: 0 0;
}

#header {
    width: 100%;
    height: 1;
    background: #7d56f4;
    color: #ffffff;
    text-style: bold;
    content-align: center middle;
}

#breadcrumb {
    width: 100%;
    height: 1;
    background: #2e2e2e;
    color: #ffffff;
    text-style: bold;
    padding: 0 2;
}

#columns {
    height: 1fr;
}

ColumnPanel {
    height: auto;
    padding: 2 3;
    margin: 0 1;
    color: #ffffff;
}

ColumnPanel.focused {
    padding: 1 2;
    border: round #7d56f4;
}

ColumnPanel.hidden {
    display: none;
}

ArrowIndicator {
    width: 3;
    height: 1fr;
    content-align: center middle;
    color: #00d9ff;
    text-style: bold;
}

ArrowIndicator.hidden {
    display: none;
}

#footer {
    height: 1;
    color: #888888;
    text-style: italic;
    padding: 0 1;
}
"""

HELP_CSS = """
HelpScreen {
    align: center middle;
    background: transparent;
}

#help-dialog {
    width: 64;
    height: auto;
    max-height: 30;
    border: solid #00d9ff;
    background: #0a0a0a;
    padding: 1 3;
}

#help-dialog Label {
    margin: 0;
    color: #cccccc;
}

#help-dialog .help-title {
    color: #7d56f4;
    text-style: bold;
    margin: 0 0 1 0;
}

#help-dialog .help-section {
    width: 100%;
    margin: 1 0 0 0;
    color: #888888;
    text-style: bold;
}

#help-dialog .help-row {
    width: 100%;
    height: auto;
}

#help-dialog .help-key {
    width: 16;
    margin: 0 1 0 0;
    color: #00d9ff;
    text-style: bold;
}

#help-dialog .help-desc {
    width: 1fr;
}
"""
