from werkzeug.exceptions import BadRequest, NotFound


class JokeNotFound(NotFound):
    """The referenced joke does not exist."""

    def __init__(self, joke_id):
        super().__init__(f"Joke id {joke_id} doesn't exist.")
        self.joke_id = joke_id


class ValidationFailure(BadRequest):
    """Submitted data failed shape or range checks.

    ``messages`` is a list of ``{"field", "rule", "message"}`` dicts, one
    per failed check, in the order the checks ran.
    """

    def __init__(self, messages):
        super().__init__('; '.join(m['message'] for m in messages))
        self.messages = messages
