"""Story playback engine: navigation, timer, and session state machine."""
