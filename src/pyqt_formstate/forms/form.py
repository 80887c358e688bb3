"""Form - container binding a FormState, a FormScope and the form body."""

import logging
from typing import Callable, Optional

from pyqt_formstate.forms.composition import Composition
from pyqt_formstate.forms.form_scope import FormScope
from pyqt_formstate.forms.form_state import FormState
from pyqt_formstate.protocols import FormConfig, get_form_config
from pyqt_formstate.services import FlagContextManager, FormFlag

logger = logging.getLogger(__name__)

SubmitCallback = Callable[[FormScope], None]
FormBody = Callable[[FormScope], None]


class Form:
    """
    Declarative form container.

    The body is a callable receiving the FormScope. It is run once per
    ``compose()`` pass and attaches validation with ``validation_effect`` /
    ``form_field``::

        def body(scope):
            form_field(scope, EMAIL, "", [RequiredValidator("email is required"),
                                          EmailValidator("must be a valid email address")])

        form = Form(on_submit=lambda scope: save(scope.value(EMAIL)), content=body)
        form.compose()

    ``on_submit`` may be reassigned at any time; ``FormScope.submit()``
    always calls the callback assigned most recently.

    With ``FormConfig.recompose_on_change`` (the default) the body is re-run
    whenever a field value changes or the form is reset outside a pass, so
    validators reading other fields (e.g. password confirmation) are rebuilt
    and re-evaluated.
    """

    def __init__(self, on_submit: SubmitCallback, content: FormBody,
                 state: Optional[FormState] = None, config: Optional[FormConfig] = None):
        """
        Args:
            on_submit: Called with the scope when a submit finds the form valid
            content: The form body
            state: Backing FormState; hoist it to keep values across Form instances
            config: Behavior overrides (defaults to get_form_config())
        """
        self.config = config or get_form_config()
        self.state = state if state is not None else FormState()
        self.content = content
        self._on_submit = on_submit
        self.scope = FormScope(self.state, self._dispatch_submit)
        self.composition = Composition()

        self._in_composition = False
        self._recompose_pending = False

        if self.config.recompose_on_change:
            self.state.connect_listener(self._on_state_changed)

    @property
    def on_submit(self) -> SubmitCallback:
        return self._on_submit

    @on_submit.setter
    def on_submit(self, callback: SubmitCallback) -> None:
        self._on_submit = callback

    def _dispatch_submit(self, scope: FormScope) -> None:
        # Late lookup so the scope never holds on to a stale callback
        self._on_submit(scope)

    def compose(self) -> None:
        """
        Run the body until no pass schedules another.

        Writes made during a pass (defaults being initialized, for instance)
        schedule one follow-up pass, bounded by ``max_recompose_passes``.
        Calling compose() from inside the body only schedules a follow-up.
        """
        if FlagContextManager.is_flag_set(self, FormFlag.IN_COMPOSITION):
            self._recompose_pending = True
            return

        passes = 0
        while True:
            self._recompose_pending = False
            with FlagContextManager.composition_context(self):
                with self.composition.composing():
                    self.content(self.scope)
            passes += 1

            if not self._recompose_pending:
                break
            if passes >= self.config.max_recompose_passes:
                logger.warning(
                    f"Form body still changing after {passes} passes; "
                    f"stopping recomposition (check for a body writing values on every pass)"
                )
                self._recompose_pending = False
                break

        logger.debug(f"Form composed in {passes} pass(es), {len(self.composition)} binding(s)")

    def dispose(self) -> None:
        """Disconnect from the state and dispose every binding."""
        self.state.disconnect_listener(self._on_state_changed)
        self.composition.dispose()

    def _on_state_changed(self) -> None:
        self.compose()
