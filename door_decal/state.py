"""
State Management Module.
Implements the 'Store' pattern to unify access to Streamlit's session state.
"""
import streamlit as st
from dataclasses import dataclass
from typing import Optional, TypedDict

from door_decal.session import ConfiguratorSession

# --- TypedDict Definitions ---

class StoreState(TypedDict, total=False):
    """
    Type definition for the keys one configurator keeps in session state.
    """
    session: ConfiguratorSession
    gesture_token: Optional[str]
    upload_token: Optional[str]
    upload_failed: bool

@dataclass
class SessionStore:
    """
    Centralized store for one configurator.
    Wraps st.session_state to provide typed access; keys are prefixed with
    `namespace` so several configurators can live on the same page.
    """
    namespace: str = "configurator"

    def __post_init__(self):
        """Initialize default state values if they don't exist."""
        defaults: StoreState = {
            'session': ConfiguratorSession(),
            'gesture_token': None,
            'upload_token': None,
            'upload_failed': False,
        }

        for key, value in defaults.items():
            full_key = self.key(key)
            if full_key not in st.session_state:
                st.session_state[full_key] = value

    def key(self, name: str) -> str:
        """Session-state key for `name` within this configurator."""
        return f"{self.namespace}_{name}"

    # --- Properties for Typed Access ---

    @property
    def session(self) -> ConfiguratorSession:
        return st.session_state[self.key('session')]

    @session.setter
    def session(self, val: ConfiguratorSession):
        st.session_state[self.key('session')] = val

    @property
    def gesture_token(self) -> Optional[str]:
        return st.session_state.get(self.key('gesture_token'))

    @gesture_token.setter
    def gesture_token(self, val: Optional[str]):
        st.session_state[self.key('gesture_token')] = val

    @property
    def upload_token(self) -> Optional[str]:
        return st.session_state.get(self.key('upload_token'))

    @upload_token.setter
    def upload_token(self, val: Optional[str]):
        st.session_state[self.key('upload_token')] = val

    @property
    def upload_failed(self) -> bool:
        return st.session_state.get(self.key('upload_failed'), False)

    @upload_failed.setter
    def upload_failed(self, val: bool):
        st.session_state[self.key('upload_failed')] = val

    # --- Actions ---

    def reset(self):
        """Starts a fresh configuration, discarding any uploaded artwork."""
        self.session = ConfiguratorSession()
        self.gesture_token = None
        self.upload_token = None
        self.upload_failed = False

    def accept_gesture(self, token: str) -> bool:
        """
        Records a drag gesture as handled.
        Returns False when the same gesture was already replayed on an earlier rerun.
        """
        if not token or token == self.gesture_token:
            return False
        self.gesture_token = token
        return True

    def accept_upload(self, uploaded_file) -> bool:
        """
        Applies a newly chosen file once. Returns True when the active artwork changed.
        """
        if uploaded_file is None:
            self.upload_token = None
            return False
        token = getattr(uploaded_file, "file_id", None) or f"{uploaded_file.name}:{getattr(uploaded_file, 'size', '')}"
        if token == self.upload_token:
            return False
        self.upload_token = token
        changed = self.session.upload(uploaded_file)
        self.upload_failed = not changed
        return changed
