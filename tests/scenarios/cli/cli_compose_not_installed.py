import vedro

from contexts.project_dir import config_file
from contexts.project_dir import project_dir
from helpers.run_cli import run_cli


class Scenario(vedro.Scenario):
    subject = 'exit with one line error when docker-compose is not installed'

    def given_project(self):
        self.root = project_dir(dotenv='FOO=bar\n')

    def given_config_with_missing_compose(self):
        self.binary = self.root / 'missing' / 'docker-compose'
        self.config = config_file(self.root, f'docker_compose: {self.binary}\n')

    def when_user_runs_loadenv(self):
        self.result = run_cli('--config', str(self.config), cwd=self.root)

    def then_it_should_exit_with_error(self):
        assert self.result.returncode == 1

    def and_it_should_print_error_without_traceback(self):
        assert f"Can't build environment: `{self.binary} build .` can't be started" in self.result.stderr
        assert 'Traceback' not in self.result.stderr
