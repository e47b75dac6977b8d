from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..core.enums import PresenceStatus
from ..core.exceptions import DuplicateEntryError, ValidationError
from ..container import Container
from .codec import record_to_dict

INTEGRITY_WARNING = "Warning: the ledger has been tampered with! Data integrity compromised."


def register(app: Flask, container: Container) -> None:
    service = container.ledger_service

    def _record_response(subject_id, status, calendar_date=None):
        try:
            record = service.record_attendance(subject_id, status, calendar_date)
        except DuplicateEntryError as e:
            return jsonify({
                "success": False,
                "message": str(e),
                "existing": record_to_dict(e.existing),
            }), 409
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("Failed to record attendance")
            return jsonify({"success": False, "message": "Internal error while recording attendance"}), 500

        return jsonify({
            "success": True,
            "message": f"Attendance marked as {record.payload.status_value} for subject {record.payload.subject_id}",
            "record": record_to_dict(record),
        }), 201

    @app.route("/api/chain", methods=["GET"], endpoint="api_chain")
    def api_chain():
        return jsonify({
            "records": [record_to_dict(r) for r in service.get_chain()],
            "valid": service.is_valid(),
        })

    @app.route("/api/chain.csv", methods=["GET"], endpoint="api_chain_csv")
    def api_chain_csv():
        csv_bytes = service.export_csv().encode("utf-8-sig")
        filename = f"attendance_ledger_{date.today().strftime('%Y%m%d')}.csv"
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/history", methods=["GET"], endpoint="api_history")
    def api_history():
        valid = service.is_valid()
        return jsonify({
            "rows": service.get_history_ui(),
            "valid": valid,
            "warning": None if valid else INTEGRITY_WARNING,
        })

    @app.route("/api/summary", methods=["GET"], endpoint="api_summary")
    def api_summary():
        subject_id = (request.args.get("subject_id") or "").strip() or None
        return jsonify(service.get_summary(subject_id).as_dict())

    @app.route("/api/summary/subjects", methods=["GET"], endpoint="api_summary_subjects")
    def api_summary_subjects():
        return jsonify({"subjects": [s.as_dict() for s in service.get_subject_summaries()]})

    @app.route("/api/validate", methods=["GET"], endpoint="api_validate")
    def api_validate():
        return jsonify(service.validation_report().as_dict())

    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance")
    def api_attendance():
        data = request.get_json(silent=True) or {}
        return _record_response(data.get("subject_id", ""), data.get("status", ""), data.get("date"))

    @app.route("/api/attendance/present", methods=["POST"], endpoint="api_mark_present")
    def api_mark_present():
        data = request.get_json(silent=True) or {}
        return _record_response(data.get("subject_id", ""), PresenceStatus.PRESENT)

    @app.route("/api/attendance/absent", methods=["POST"], endpoint="api_mark_absent")
    def api_mark_absent():
        data = request.get_json(silent=True) or {}
        return _record_response(data.get("subject_id", ""), PresenceStatus.ABSENT)

    @app.route("/api/reset", methods=["POST"], endpoint="api_reset")
    def api_reset():
        data = request.get_json(silent=True) or {}
        if not service.reset(confirmed=data.get("confirm") is True):
            return jsonify({"success": False, "message": "Reset requires confirmation"}), 400
        return jsonify({"success": True, "message": "All attendance data cleared!"}), 200
