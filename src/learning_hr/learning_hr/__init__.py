"""Learning/HR rules package.

Organized by feature modules (policy, attendance, payroll, progress, quizzes,
enrollment, ...) with a thin Flask controller layer over service/repository
layers. All persistence goes through the ``RecordStore`` collaborator.
"""
