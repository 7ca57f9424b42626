import vedro

from contexts.fake_docker_compose import fake_docker_compose
from contexts.project_dir import project_dir
from helpers.compose_calls import compose_calls
from loadenv import MalformedLine
from loadenv import Settings
from loadenv import load


class Scenario(vedro.Scenario):
    subject = 'do not start docker-compose on malformed env file'

    def given_project(self):
        self.root = project_dir(dotenv='FOO=bar\nMALFORMED\nBAZ=qux\n')

    def given_docker_compose(self):
        self.compose = fake_docker_compose()

    def when_user_loads_env(self):
        self.environ = {}
        try:
            load(root=self.root, settings=Settings(docker_compose=self.compose.binary), environ=self.environ)
        except MalformedLine as e:
            self.error = e

    def then_it_should_raise_malformed_line(self):
        assert self.error.line == 'MALFORMED'

    def and_only_vars_before_it_should_be_set(self):
        assert self.environ == {'FOO': 'bar'}

    def and_docker_compose_should_not_run(self):
        assert compose_calls(self.compose.calls_log) == []
