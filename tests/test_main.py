"""Tests de la aplicación de línea de comandos."""
import sys

from main import TopologyAnalysisApp, main


def test_run_writes_graphml(snapshot_file, tmp_path, capsys):
    export_dir = tmp_path / 'exports'
    report = TopologyAnalysisApp(snapshot_file, export_dir).run()
    
    assert report.status == 'elevated'
    assert report.summary.node_count == 4
    
    files = list(export_dir.glob('*.graphml'))
    assert len(files) == 1
    assert files[0].name.startswith('concordium-topology-')
    assert '<node id="n1">' in files[0].read_text(encoding='utf-8')
    
    out = capsys.readouterr().out
    assert 'Estado de la red: ELEVATED' in out
    assert 'GraphML:' in out


def test_run_without_export(snapshot_file, tmp_path):
    export_dir = tmp_path / 'exports'
    report = TopologyAnalysisApp(snapshot_file, export_dir).run(export=False)
    
    assert report.bottlenecks[0] == 'n3'
    assert not export_dir.exists()


def test_main_no_export_flag(snapshot_file, tmp_path, monkeypatch, capsys):
    export_dir = tmp_path / 'exports'
    monkeypatch.setattr(sys, 'argv', [
        'main.py', str(snapshot_file), '--export-dir', str(export_dir), '--no-export'
    ])
    
    main()
    
    assert 'RESUMEN DE LA RED' in capsys.readouterr().out
    assert not export_dir.exists()


def test_main_exports_to_directory(snapshot_file, tmp_path, monkeypatch):
    export_dir = tmp_path / 'exports'
    monkeypatch.setattr(sys, 'argv', ['main.py', str(snapshot_file), '--export-dir', str(export_dir)])
    
    main()
    
    assert len(list(export_dir.glob('*.graphml'))) == 1
