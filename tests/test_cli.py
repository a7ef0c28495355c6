"""
Tests for the CLI module
"""

import json
import tempfile
from pathlib import Path
from unittest.mock import Mock, patch

from click.testing import CliRunner

from dropwatch.cli import main
from dropwatch.cli.commands.watch import make_payload_writer


class TestCLI:
    """Test the CLI commands"""

    def setup_method(self):
        """Set up test fixtures"""
        self.runner = CliRunner()

    def test_main_help(self):
        result = self.runner.invoke(main, ['--help'])
        assert result.exit_code == 0
        for command in ('watch', 'read', 'init-config', 'status'):
            assert command in result.output

    def test_watch_help(self):
        """Test watch command help"""
        result = self.runner.invoke(main, ['watch', '--help'])
        assert result.exit_code == 0
        assert 'Watch a directory and ingest the drop file' in result.output
        assert '--file' in result.output
        assert '--read-on-start' in result.output
        assert '--encoding' in result.output

    def test_init_config(self):
        """Test creating TOML configuration file"""
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / 'dropwatch.config.toml'
            result = self.runner.invoke(main, ['init-config', str(config_path)])

            assert result.exit_code == 0
            assert 'TOML configuration file created' in result.output
            content = config_path.read_text()
            assert 'file_name =' in content
            assert 'encoding =' in content

    def test_init_config_adds_extension(self):
        """Test that a missing .toml extension is appended"""
        with tempfile.TemporaryDirectory() as temp_dir:
            result = self.runner.invoke(main, ['init-config', str(Path(temp_dir) / 'settings')])

            assert result.exit_code == 0
            assert (Path(temp_dir) / 'settings.toml').exists()

    @patch('dropwatch.cli.commands.watch.FileWatcher')
    @patch('dropwatch.cli.commands.watch.time.sleep')
    def test_watch_with_options(self, mock_sleep, mock_watcher_class):
        """Test that CLI options reach the watcher configuration"""
        mock_watcher = Mock()
        mock_watcher_class.return_value = mock_watcher
        mock_sleep.side_effect = KeyboardInterrupt()  # Simulate Ctrl+C

        with tempfile.TemporaryDirectory() as temp_dir:
            result = self.runner.invoke(main, [
                'watch', temp_dir,
                '--file', 'orders.txt',
                '--encoding', 'cp1250',
                '--no-read-on-start',
                '--interval', '0.5'
            ])

            assert result.exit_code == 0, result.output
            config = mock_watcher_class.call_args.args[0]
            assert config.encoding == 'cp1250'
            assert config.polling_interval == 0.5
            assert config.file_info.directory_path == temp_dir
            assert config.file_info.file_name == 'orders.txt'
            assert config.file_info.read_on_start is False

            mock_watcher.start_from_config.assert_called_once()
            mock_watcher.start_from_config.return_value.close.assert_called_once()
            assert 'DropWatch stopped' in result.output

    @patch('dropwatch.cli.commands.watch.FileWatcher')
    @patch('dropwatch.cli.commands.watch.time.sleep')
    def test_watch_with_config_file(self, mock_sleep, mock_watcher_class):
        """Test that a dropwatch.config.toml in the directory is picked up"""
        mock_sleep.side_effect = KeyboardInterrupt()

        with tempfile.TemporaryDirectory() as temp_dir:
            (Path(temp_dir) / 'dropwatch.config.toml').write_text(
                '[dropwatch]\nencoding = "latin-1"\n\n'
                '[dropwatch.file_info]\nfile_name = "in.csv"\nread_on_start = true\n'
            )
            result = self.runner.invoke(main, ['watch', temp_dir])

            assert result.exit_code == 0, result.output
            config = mock_watcher_class.call_args.args[0]
            assert config.encoding == 'latin-1'
            assert config.file_info.file_name == 'in.csv'
            assert config.file_info.read_on_start is True

    def test_watch_without_file_name(self):
        """Test that watching fails when no drop file is configured"""
        with tempfile.TemporaryDirectory() as temp_dir:
            (Path(temp_dir) / 'dropwatch.config.toml').write_text('[dropwatch.file_info]\nfile_name = ""\n')
            result = self.runner.invoke(main, ['watch', temp_dir])

            assert result.exit_code == 1
            assert 'No drop file name given' in result.output

    def test_watch_missing_directory(self):
        """Test that a missing directory reports an error"""
        with tempfile.TemporaryDirectory() as temp_dir:
            missing = str(Path(temp_dir) / 'missing')
            result = self.runner.invoke(main, ['watch', missing, '--file', 'drop.txt'])

            assert result.exit_code == 1
            assert 'Error' in result.output

    def test_watch_invalid_encoding(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            result = self.runner.invoke(main, ['watch', temp_dir, '--encoding', 'no-such-encoding'])

            assert result.exit_code == 1
            assert 'Unknown encoding' in result.output

    def test_watch_alias(self):
        result = self.runner.invoke(main, ['w', '--help'])
        assert result.exit_code == 0
        assert "Alias for 'watch' command" in result.output

    def test_read_ingests_file(self):
        """Test the one-shot read command"""
        with tempfile.TemporaryDirectory() as temp_dir:
            drop_file = Path(temp_dir) / 'drop.txt'
            drop_file.write_text('one-shot content')

            result = self.runner.invoke(main, ['read', temp_dir, '--file', 'drop.txt'])

            assert result.exit_code == 0, result.output
            assert 'one-shot content' in result.output
            assert not drop_file.exists()

    def test_read_without_file(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            result = self.runner.invoke(main, ['read', temp_dir, '--file', 'drop.txt'])

            assert result.exit_code == 0
            assert 'No drop file found' in result.output

    def test_read_decode_error(self):
        """Test that an undecodable file exits with an error and stays on disk"""
        with tempfile.TemporaryDirectory() as temp_dir:
            drop_file = Path(temp_dir) / 'drop.txt'
            drop_file.write_bytes(b'\xff\xfe')

            result = self.runner.invoke(main, ['read', temp_dir, '--file', 'drop.txt', '--encoding', 'ascii'])

            assert result.exit_code == 1
            assert 'Error' in result.output
            assert drop_file.exists()

    def test_read_delete_error(self):
        """Test that content is printed even if the file can't be deleted"""
        with tempfile.TemporaryDirectory() as temp_dir:
            (Path(temp_dir) / 'drop.txt').write_text('still delivered')

            with patch('dropwatch.core.watcher.os.remove', side_effect=PermissionError('denied')):
                result = self.runner.invoke(main, ['read', temp_dir, '--file', 'drop.txt'])

            assert result.exit_code == 1
            assert 'still delivered' in result.output
            assert 'not deleted' in result.output

    def test_status_with_waiting_file(self):
        """Test status when a drop file is present"""
        with tempfile.TemporaryDirectory() as temp_dir:
            (Path(temp_dir) / 'drop.txt').write_text('waiting')

            result = self.runner.invoke(main, ['status', temp_dir, '--verbose'])

            assert result.exit_code == 0
            assert 'Using defaults' in result.output
            assert 'Drop file waiting: drop.txt' in result.output
            assert 'Encoding: utf-8' in result.output

    def test_status_without_file(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            (Path(temp_dir) / 'dropwatch.config.toml').write_text('[dropwatch.file_info]\nfile_name = "in.txt"\n')

            result = self.runner.invoke(main, ['status', temp_dir])

            assert result.exit_code == 0
            assert 'Configuration: dropwatch.config.toml' in result.output
            assert 'No drop file present (in.txt)' in result.output


class TestPayloadWriter:
    """Test the JSON lines output sink"""

    def test_writes_json_lines(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            output = Path(temp_dir) / 'payloads.jsonl'
            writer = make_payload_writer(str(output), 'drop.txt')

            writer('first')
            writer('second\n')

            records = [json.loads(line) for line in output.read_text().splitlines()]
            assert [r['content'] for r in records] == ['first', 'second\n']
            assert records[1]['length'] == 7
            assert all(r['file'] == 'drop.txt' for r in records)
